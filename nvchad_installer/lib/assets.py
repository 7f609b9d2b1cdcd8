from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_file(src: str, dst: str, *, dry_run: bool = False) -> None:
    """Copy one file over ``dst``, replacing it if present.

    The destination directory must already exist.
    """
    s = Path(src)
    d = Path(dst)
    if not s.is_file():
        raise FileNotFoundError(src)

    if dry_run:
        logger.info("Would copy %s to %s", str(s), str(d))
        return

    shutil.copyfile(s, d)
    logger.info("Copied %s to %s", str(s), str(d))


def remove_tree(path: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would remove %s", str(p))
        return
    shutil.rmtree(p)


def ensure_dir(path: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if p.is_dir():
        return
    if dry_run:
        logger.info("Would create directory %s", str(p))
        return
    p.mkdir(parents=True, exist_ok=True)
