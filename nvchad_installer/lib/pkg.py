from __future__ import annotations

import logging
from typing import Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


def _privileged(argv: list[str], sudo: bool) -> list[str]:
    return ["sudo", *argv] if sudo else argv


def apt_install(packages: Sequence[str], *, sudo: bool = True, dry_run: bool = False) -> None:
    """Install system packages with apt-get (interactive; apt asks before installing)."""
    if not packages:
        return
    run_cmd(_privileged(["apt-get", "install", *packages], sudo), dry_run=dry_run)


def npm_install_global(package: str, *, sudo: bool = True, dry_run: bool = False) -> None:
    run_cmd(_privileged(["npm", "install", "-g", package], sudo), dry_run=dry_run)
