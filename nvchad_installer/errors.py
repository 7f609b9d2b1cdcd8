from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .pipeline import Stage
    from .prereqs import PrerequisiteSpec


class InstallerError(RuntimeError):
    """A fatal, already-logged installer failure.

    The pipeline sets ``stage`` to ``Stage.ABORTED`` and records the last
    stage reached before the failure on ``last_stage``, so the top-level
    handler can report where the run stopped.
    """

    stage: Optional["Stage"] = None
    last_stage: Optional["Stage"] = None


class PrerequisiteError(InstallerError):
    def __init__(self, message: str, spec: "PrerequisiteSpec") -> None:
        super().__init__(message)
        self.spec = spec


class MissingToolError(PrerequisiteError):
    pass


class OutdatedToolError(PrerequisiteError):
    pass


class CommandError(InstallerError):
    def __init__(self, argv: Sequence[str], returncode: Optional[int], detail: str) -> None:
        super().__init__(f"Command failed ({returncode}): {detail}")
        self.argv = list(argv)
        self.returncode = returncode
        self.detail = detail
