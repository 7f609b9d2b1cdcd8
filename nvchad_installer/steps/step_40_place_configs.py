from __future__ import annotations

import logging
from pathlib import Path

from ..context import InstallCtx
from ..lib.assets import copy_file, ensure_dir
from ..pipeline import Stage

logger = logging.getLogger(__name__)


class PlaceConfigsStep:
    step_id = "40_place_configs"
    stage = Stage.CONFIG_PLACED

    def run(self, ctx: InstallCtx) -> None:
        cfg = ctx.cfg
        configs_dir = Path(cfg.configs_dir)

        logger.info("Configuring NVChad and LSPs...")
        ensure_dir(str(ctx.custom_dir), dry_run=ctx.dry_run)

        # Only lua/custom is created; other destination parents come from the clone.
        for mapping in cfg.config_files:
            copy_file(
                str(configs_dir / mapping.source),
                str(ctx.distribution_dir / mapping.destination),
                dry_run=ctx.dry_run,
            )

        logger.info("NVChad and LSPs configuration completed.")
