from __future__ import annotations

import logging

from ..context import InstallCtx
from ..pipeline import Stage
from ..prereqs import check_prerequisites

logger = logging.getLogger(__name__)


class CheckPrerequisitesStep:
    step_id = "00_check_prerequisites"
    stage = Stage.GATE_PASSED

    def run(self, ctx: InstallCtx) -> None:
        # Probes are read-only, so they run even in dry-run mode.
        check_prerequisites(ctx.cfg.prerequisites, mode=ctx.cfg.version_compare)
