from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from .context import InstallCtx
from .errors import InstallerError

logger = logging.getLogger(__name__)


class Stage(enum.Enum):
    START = "start"
    GATE_PASSED = "gate_passed"
    EDITOR_READY = "editor_ready"
    FONT_READY = "font_ready"
    DISTRIBUTION_READY = "distribution_ready"
    CONFIG_PLACED = "config_placed"
    LSPS_READY = "lsps_ready"
    DONE = "done"
    ABORTED = "aborted"


class Step(Protocol):
    """A single idempotent step."""

    step_id: str
    stage: Stage

    def run(self, ctx: InstallCtx) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    stage: Stage
    ran_steps: List[str]


def run_pipeline(
    *,
    ctx: InstallCtx,
    steps: Sequence[Step],
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps strictly in order; the first failure aborts the run.

    There is no rollback: an exception leaves the filesystem as the failing
    step left it. InstallerError is tagged ABORTED along with the last stage reached.
    """

    ran: List[str] = []
    stage = Stage.START

    for step in steps:
        logger.info("Running step %s", step.step_id)
        try:
            step.run(ctx)
        except InstallerError as e:
            e.stage = Stage.ABORTED
            e.last_stage = stage
            logger.debug("Aborted in %s (last stage %s)", step.step_id, stage.value)
            raise
        stage = step.stage
        ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            return PipelineResult(stage=stage, ran_steps=ran)

    logger.info("Setup completed successfully!")
    return PipelineResult(stage=Stage.DONE, ran_steps=ran)
