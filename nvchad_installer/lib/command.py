from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(argv: Sequence[str], *, dry_run: bool = False) -> CmdResult:
    """Run a command in the foreground and fail fast.

    - stdin/stdout/stderr are inherited, so progress bars and prompts from
      the child reach the terminal as they happen.
    - Exit 0 logs a confirmation naming the command.
    - Non-zero exit or a spawn failure logs the command and the underlying
      detail as errors, then raises CommandError.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    cmd = fmt_argv(argv_list)

    if dry_run:
        logger.info("Would run: %s", cmd)
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    try:
        p = subprocess.run(argv_list)
    except OSError as e:
        logger.error("Error executing command: %s", cmd)
        logger.error("%s", e)
        raise CommandError(argv_list, None, str(e)) from e

    if p.returncode != 0:
        detail = f"Process exited with status {p.returncode}"
        logger.error("Error executing command: %s", cmd)
        logger.error("%s", detail)
        raise CommandError(argv_list, p.returncode, detail)

    logger.info("Command executed: %s", cmd)
    return CmdResult(argv=argv_list, returncode=p.returncode, stdout="", stderr="")


def probe_cmd(argv: Sequence[str]) -> Optional[str]:
    """Run a read-only probe and return its trimmed stdout, or None if it failed."""

    argv_list = list(argv)
    try:
        p = subprocess.run(
            argv_list,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        logger.debug("PROBE %s unavailable: %s", fmt_argv(argv_list), e)
        return None

    if p.stderr:
        logger.debug("STDERR %s", p.stderr.strip())
    if p.returncode != 0:
        logger.debug("PROBE %s exited %s", fmt_argv(argv_list), p.returncode)
        return None

    return (p.stdout or "").strip()
