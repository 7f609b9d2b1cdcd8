from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.assets import ensure_dir
from ..lib.command import run_cmd
from ..pipeline import Stage

logger = logging.getLogger(__name__)


class InstallFontStep:
    """Download and unpack the font archive; always re-fetches."""

    step_id = "20_install_font"
    stage = Stage.FONT_READY

    def run(self, ctx: InstallCtx) -> None:
        cfg = ctx.cfg
        font_dir = ctx.font_dir
        archive = ctx.font_archive

        logger.info("Installing JetBrains Mono Nerd Font...")
        ensure_dir(str(font_dir), dry_run=ctx.dry_run)

        run_cmd(["curl", "-L", "-o", str(archive), cfg.font_url], dry_run=ctx.dry_run)
        # -o: overwrite files left by a previous run instead of prompting.
        run_cmd(["unzip", "-o", "-q", str(archive), "-d", str(font_dir)], dry_run=ctx.dry_run)

        if ctx.dry_run:
            logger.info("Would remove %s", str(archive))
        else:
            archive.unlink()

        run_cmd(["fc-cache", "-f"], dry_run=ctx.dry_run)
        logger.info("JetBrains Mono Nerd Font installation completed.")
