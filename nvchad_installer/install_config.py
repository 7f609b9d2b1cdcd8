from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .prereqs import DEFAULT_PREREQUISITES, LEXICOGRAPHIC, SEMANTIC, PrerequisiteSpec

DEFAULT_FONT_URL = "https://download.jetbrains.com/fonts/JetBrainsMono-2.242.zip"
DEFAULT_DISTRIBUTION_REPO = "https://github.com/NvChad/NvChad"


@dataclass(frozen=True)
class ConfigFileMapping:
    source: str
    destination: str


DEFAULT_CONFIG_FILES: Tuple[ConfigFileMapping, ...] = (
    ConfigFileMapping("chadrc.lua", "lua/custom/chadrc.lua"),
    ConfigFileMapping("plugins.lua", "lua/custom/plugins.lua"),
    ConfigFileMapping("lspconfig.lua", "lua/plugins/configs/lspconfig.lua"),
)


def _argv(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return tuple(shlex.split(value))
    return tuple(str(v) for v in value)


@dataclass(frozen=True)
class InstallConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, key: str) -> Dict[str, Any]:
        return self.raw.get(key) or {}

    @property
    def prerequisites(self) -> List[PrerequisiteSpec]:
        entries = self.raw.get("prerequisites")
        if not entries:
            return list(DEFAULT_PREREQUISITES)
        return [
            PrerequisiteSpec(
                name=str(e["name"]),
                probe_command=_argv(e["command"]),
                min_version=str(e["min_version"]),
            )
            for e in entries
        ]

    @property
    def version_compare(self) -> str:
        return str(self.raw.get("version_compare") or LEXICOGRAPHIC)

    @property
    def use_sudo(self) -> bool:
        return bool(self.raw.get("use_sudo", True))

    @property
    def editor_package(self) -> str:
        return str(self._section("editor").get("package") or "neovim")

    @property
    def editor_probe(self) -> Tuple[str, ...]:
        return _argv(self._section("editor").get("probe") or "nvim --version")

    @property
    def font_url(self) -> str:
        return str(self._section("font").get("url") or DEFAULT_FONT_URL)

    @property
    def font_archive(self) -> str:
        return str(self._section("font").get("archive") or "JetBrainsMono.zip")

    @property
    def font_dir(self) -> str:
        return str(self._section("font").get("dir") or ".local/share/fonts")

    @property
    def distribution_repo(self) -> str:
        return str(self._section("distribution").get("repo") or DEFAULT_DISTRIBUTION_REPO)

    @property
    def distribution_ref(self) -> str:
        return str(self._section("distribution").get("ref") or "v2.0")

    @property
    def distribution_dir(self) -> str:
        return str(self._section("distribution").get("dir") or ".config/nvim")

    @property
    def configs_dir(self) -> str:
        return str(self.raw.get("configs_dir") or Path(__file__).resolve().parent / "configs")

    @property
    def config_files(self) -> List[ConfigFileMapping]:
        entries = self.raw.get("config_files")
        if not entries:
            return list(DEFAULT_CONFIG_FILES)
        return [ConfigFileMapping(source=str(e["source"]), destination=str(e["destination"])) for e in entries]

    @property
    def language_servers(self) -> List[str]:
        servers = self.raw.get("language_servers")
        if servers is None:
            return ["pyright", "typescript-language-server"]
        return [str(s) for s in servers]


def load_install_config(path: Optional[str]) -> InstallConfig:
    if path is None:
        return InstallConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("install config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the install config") from e

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"install config is not valid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError("install config must contain a mapping/object")

    cfg = InstallConfig(raw=raw)
    validate_install_config(cfg)
    return cfg


def validate_install_config(cfg: InstallConfig) -> None:
    """Reject a config the steps would trip over, before anything runs."""

    if cfg.version_compare not in {LEXICOGRAPHIC, SEMANTIC}:
        raise ValueError(f"Unknown version_compare mode: {cfg.version_compare}")

    for key in ("editor", "font", "distribution"):
        if not isinstance(cfg.raw.get(key) or {}, dict):
            raise ValueError(f"install config section {key!r} must be a mapping")

    for key in ("prerequisites", "config_files", "language_servers"):
        if not isinstance(cfg.raw.get(key) or [], list):
            raise ValueError(f"install config key {key!r} must be a list")

    try:
        cfg.prerequisites
        cfg.config_files
    except (KeyError, TypeError) as e:
        raise ValueError(f"install config has an invalid entry (missing or malformed {e})") from e
