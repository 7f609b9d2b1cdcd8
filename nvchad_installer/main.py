from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .context import make_ctx
from .errors import InstallerError
from .install_config import InstallConfig, load_install_config
from .logging_utils import DEFAULT_LOG_PATH, configure_logging, shutdown_logging
from .pipeline import PipelineResult, Stage, run_pipeline
from .steps import (
    CheckPrerequisitesStep,
    InstallDistributionStep,
    InstallEditorStep,
    InstallFontStep,
    InstallLanguageServersStep,
    PlaceConfigsStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        CheckPrerequisitesStep(),
        InstallEditorStep(),
        InstallFontStep(),
        InstallDistributionStep(),
        PlaceConfigsStep(),
        InstallLanguageServersStep(),
    ]


def run(
    cfg: InstallConfig,
    *,
    dry_run: bool = False,
    check_only: bool = False,
) -> PipelineResult:
    """Run the prerequisite gate, then every provisioning step in order.

    Logging must already be configured. Failures propagate: InstallerError
    for gated checks and commands, OSError for filesystem faults.
    """

    ctx = make_ctx(cfg, dry_run=dry_run)
    steps = build_steps()

    stop_after = CheckPrerequisitesStep.step_id if check_only else None
    return run_pipeline(ctx=ctx, steps=steps, stop_after=stop_after)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="nvchad-installer")
    p.add_argument("--config", default=None, help="Path to install config (yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer log (appended)")
    p.add_argument("--dry-run", action="store_true", help="Log commands and file changes without running them")
    p.add_argument("--check-only", action="store_true", help="Only check prerequisites")
    p.add_argument("--verbose", action="store_true", help="Also log probe output and debug detail")

    args = p.parse_args(argv)

    try:
        configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)
    except OSError as e:
        print(f"Cannot open log file {args.log}: {e}", file=sys.stderr)
        return 1

    # Handlers are flushed and closed on every path, fatal ones included.
    try:
        try:
            cfg = load_install_config(args.config)
        except (FileNotFoundError, ValueError) as e:
            logger.error("Invalid install config %s: %s", args.config, e)
            return 1

        run(cfg, dry_run=args.dry_run, check_only=args.check_only)
        return 0
    except InstallerError as e:
        # Already logged where it was raised.
        logger.info(
            "Run %s after stage %s",
            (e.stage or Stage.ABORTED).value,
            (e.last_stage or Stage.START).value,
        )
        return 1
    except Exception:
        logger.exception("Installer failed")
        raise
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
