from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .install_config import InstallConfig


@dataclass(frozen=True)
class InstallCtx:
    cfg: InstallConfig
    home: Path
    work_dir: Path
    dry_run: bool = False

    def _under_home(self, rel: str) -> Path:
        p = Path(rel).expanduser()
        return p if p.is_absolute() else self.home / p

    @property
    def font_dir(self) -> Path:
        return self._under_home(self.cfg.font_dir)

    @property
    def font_archive(self) -> Path:
        return self.work_dir / self.cfg.font_archive

    @property
    def distribution_dir(self) -> Path:
        return self._under_home(self.cfg.distribution_dir)

    @property
    def custom_dir(self) -> Path:
        return self.distribution_dir / "lua" / "custom"


def make_ctx(cfg: InstallConfig, *, dry_run: bool = False) -> InstallCtx:
    """Build the run context from the environment ($HOME and the working directory)."""
    return InstallCtx(cfg=cfg, home=Path.home(), work_dir=Path.cwd(), dry_run=dry_run)
