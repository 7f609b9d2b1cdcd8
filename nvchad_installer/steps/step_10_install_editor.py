from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.command import probe_cmd
from ..lib.pkg import apt_install
from ..pipeline import Stage

logger = logging.getLogger(__name__)


class InstallEditorStep:
    step_id = "10_install_editor"
    stage = Stage.EDITOR_READY

    def run(self, ctx: InstallCtx) -> None:
        cfg = ctx.cfg

        logger.info("Checking if NeoVim is installed...")
        output = probe_cmd(cfg.editor_probe)
        if output is not None:
            logger.info("NeoVim version: %s", (output.splitlines() or [""])[0])
            logger.info("NeoVim is already installed.")
            return

        logger.info("Installing NeoVim...")
        apt_install([cfg.editor_package], sudo=cfg.use_sudo, dry_run=ctx.dry_run)
        logger.info("NeoVim installation completed.")
