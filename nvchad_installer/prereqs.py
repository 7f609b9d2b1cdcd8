from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import MissingToolError, OutdatedToolError
from .lib.command import probe_cmd

logger = logging.getLogger(__name__)

LEXICOGRAPHIC = "lexicographic"
SEMANTIC = "semantic"

_VERSION_TOKEN = re.compile(r"^v?\d")


@dataclass(frozen=True)
class PrerequisiteSpec:
    name: str
    probe_command: Tuple[str, ...]
    min_version: str


DEFAULT_PREREQUISITES: Tuple[PrerequisiteSpec, ...] = (
    PrerequisiteSpec("Node.js", ("node", "--version"), "v14.0.0"),
    PrerequisiteSpec("npm", ("npm", "--version"), "6.0.0"),
    PrerequisiteSpec("Git", ("git", "--version"), "2.0.0"),
)


def extract_version(output: str) -> str:
    """Pick the version token out of probe output.

    ``git --version`` prints ``git version 2.43.0``; node and npm print the
    bare version. Falls back to the whole output.
    """
    text = output.strip()
    for token in text.split():
        if _VERSION_TOKEN.match(token):
            return token
    return text


def strip_v(version: str) -> str:
    return version[1:] if version.startswith("v") else version


def _numeric_key(version: str) -> List[int]:
    key: List[int] = []
    for part in version.split("."):
        m = re.match(r"\d+", part)
        key.append(int(m.group(0)) if m else 0)
    return key


def meets_minimum(detected: str, required: str, *, mode: str = LEXICOGRAPHIC) -> bool:
    """True if ``detected`` is at least ``required``.

    The default rule is plain string comparison after stripping a leading
    ``v``: ``"10.0.0"`` sorts below ``"9.0.0"``, so multi-digit segments
    can be rejected. ``mode="semantic"`` compares dotted integers instead.
    """
    d = strip_v(detected)
    r = strip_v(required)
    if mode == SEMANTIC:
        return _numeric_key(d) >= _numeric_key(r)
    if mode != LEXICOGRAPHIC:
        raise ValueError(f"Unknown version_compare mode: {mode}")
    return d >= r


def check_prerequisite(spec: PrerequisiteSpec, *, mode: str = LEXICOGRAPHIC) -> str:
    output = probe_cmd(spec.probe_command)
    if output is None:
        msg = f"{spec.name} is not installed. Please install it and run the script again."
        logger.error(msg)
        raise MissingToolError(msg, spec)

    logger.info("%s version: %s", spec.name, output)

    detected = extract_version(output)
    if not meets_minimum(detected, spec.min_version, mode=mode):
        msg = (
            f"{spec.name} version {spec.min_version} or higher is required. "
            f"Please update {spec.name} and run the script again."
        )
        logger.error(msg)
        raise OutdatedToolError(msg, spec)

    return detected


def check_prerequisites(specs: Sequence[PrerequisiteSpec], *, mode: str = LEXICOGRAPHIC) -> dict[str, str]:
    """Check every prerequisite in order; the first failure raises."""

    found: dict[str, str] = {}
    for spec in specs:
        found[spec.name] = check_prerequisite(spec, mode=mode)
    return found
