import logging

import pytest

from nvchad_installer.errors import MissingToolError, OutdatedToolError
from nvchad_installer.prereqs import (
    DEFAULT_PREREQUISITES,
    PrerequisiteSpec,
    check_prerequisite,
    check_prerequisites,
    extract_version,
    meets_minimum,
    strip_v,
)


class TestVersionRule:
    """The gate compares version strings lexicographically after stripping a leading v."""

    @pytest.mark.parametrize(
        "detected, required, expected",
        [
            ("2.43.0", "2.0.0", True),
            ("2.0.0", "2.0.0", True),
            ("1.9.0", "2.0.0", False),
            ("v20.11.0", "v14.0.0", True),
            ("20.11.0", "v14.0.0", True),
            # Plain string comparison, not semantic versioning:
            ("10.0.0", "9.0.0", False),
            ("9.0.0", "10.0.0", True),
            ("v8.0.0", "v14.0.0", True),
        ],
    )
    def test_lexicographic(self, detected, required, expected):
        assert meets_minimum(detected, required) is expected

    @pytest.mark.parametrize(
        "detected, required, expected",
        [
            ("10.0.0", "9.0.0", True),
            ("v8.0.0", "v14.0.0", False),
            ("2.43.0", "2.43", True),
        ],
    )
    def test_semantic_opt_in(self, detected, required, expected):
        assert meets_minimum(detected, required, mode="semantic") is expected

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            meets_minimum("1", "1", mode="fuzzy")

    def test_strip_v_only_strips_one_leading_v(self):
        assert strip_v("v1.0") == "1.0"
        assert strip_v("1.0v") == "1.0v"

    @pytest.mark.parametrize(
        "output, version",
        [
            ("git version 2.43.0", "2.43.0"),
            ("v20.11.0", "v20.11.0"),
            ("9.8.1", "9.8.1"),
            ("NVIM v0.9.5\nBuild type: Release", "v0.9.5"),
            ("unknown", "unknown"),
        ],
    )
    def test_extract_version(self, output, version):
        assert extract_version(output) == version


class TestGate:
    def test_all_pass(self, fake_shell, caplog):
        caplog.set_level(logging.INFO, logger="nvchad_installer")

        found = check_prerequisites(DEFAULT_PREREQUISITES)

        assert found == {"Node.js": "v20.11.0", "npm": "9.8.1", "Git": "2.43.0"}
        assert "Git version: git version 2.43.0" in caplog.messages
        assert fake_shell.probe_calls == ["node --version", "npm --version", "git --version"]

    def test_missing_tool(self, fake_shell, caplog):
        caplog.set_level(logging.INFO, logger="nvchad_installer")
        fake_shell.probes.pop("npm")

        with pytest.raises(MissingToolError) as exc:
            check_prerequisites(DEFAULT_PREREQUISITES)

        assert exc.value.spec.name == "npm"
        errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert errors == ["npm is not installed. Please install it and run the script again."]
        # Git is never probed once npm fails.
        assert "git --version" not in fake_shell.probe_calls

    def test_failing_probe_counts_as_missing(self, fake_shell):
        fake_shell.probes["git"] = 1
        with pytest.raises(MissingToolError):
            check_prerequisite(PrerequisiteSpec("Git", ("git", "--version"), "2.0.0"))

    def test_outdated_tool(self, fake_shell, caplog):
        caplog.set_level(logging.INFO, logger="nvchad_installer")
        fake_shell.probes["git"] = "git version 1.9.0"

        with pytest.raises(OutdatedToolError):
            check_prerequisites(DEFAULT_PREREQUISITES)

        errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert errors == [
            "Git version 2.0.0 or higher is required. Please update Git and run the script again."
        ]

    def test_multi_digit_npm_is_rejected_by_default(self, fake_shell):
        fake_shell.probes["npm"] = "10.2.4"
        with pytest.raises(OutdatedToolError):
            check_prerequisites(DEFAULT_PREREQUISITES)

    def test_multi_digit_npm_passes_semantic(self, fake_shell):
        fake_shell.probes["npm"] = "10.2.4"
        found = check_prerequisites(DEFAULT_PREREQUISITES, mode="semantic")
        assert found["npm"] == "10.2.4"
