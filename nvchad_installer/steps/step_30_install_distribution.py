from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.assets import remove_tree
from ..lib.command import run_cmd
from ..pipeline import Stage

logger = logging.getLogger(__name__)


class InstallDistributionStep:
    step_id = "30_install_distribution"
    stage = Stage.DISTRIBUTION_READY

    def run(self, ctx: InstallCtx) -> None:
        cfg = ctx.cfg
        nvim_dir = ctx.distribution_dir

        logger.info("Checking if NVChad is installed...")
        # Delete-then-clone, never merge: local changes in the old tree are lost.
        if nvim_dir.exists():
            logger.info("Removing existing NVChad installation...")
            remove_tree(str(nvim_dir), dry_run=ctx.dry_run)
            logger.info("Existing NVChad installation removed.")

        logger.info("Installing NVChad...")
        run_cmd(
            [
                "git",
                "clone",
                "-b",
                cfg.distribution_ref,
                cfg.distribution_repo,
                str(nvim_dir),
                "--depth",
                "1",
            ],
            dry_run=ctx.dry_run,
        )
        logger.info("NVChad installation completed.")
