from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.pkg import npm_install_global
from ..pipeline import Stage

logger = logging.getLogger(__name__)


class InstallLanguageServersStep:
    step_id = "50_install_lsps"
    stage = Stage.LSPS_READY

    def run(self, ctx: InstallCtx) -> None:
        cfg = ctx.cfg

        logger.info("Installing LSPs for Python and TypeScript...")
        for server in cfg.language_servers:
            npm_install_global(server, sudo=cfg.use_sudo, dry_run=ctx.dry_run)
        logger.info("LSPs for Python and TypeScript installed.")
