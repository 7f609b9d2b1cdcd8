"""
Pytest configuration and fixtures for nvchad-installer tests.

``subprocess.run`` is replaced by FakeShell: probes (captured output) are
answered from ``probes``, foreground commands are recorded and succeed
unless listed in ``failures`` or ``spawn_errors``. curl and git clone
leave behind what the real tools would.
"""

import shutil
import subprocess
from pathlib import Path

import pytest

from nvchad_installer.context import InstallCtx
from nvchad_installer.install_config import InstallConfig
from nvchad_installer.logging_utils import shutdown_logging


class FakeShell:
    def __init__(self):
        self.probes = {
            "node": "v20.11.0",
            "npm": "9.8.1",
            "git": "git version 2.43.0",
            "nvim": "NVIM v0.9.5",
        }
        self.failures = {}
        self.spawn_errors = set()
        self.clone_layout = True
        self.probe_calls = []
        self.events = []

    @property
    def commands(self):
        return [text for kind, text in self.events if kind == "run"]

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        if kwargs.get("stdout") == subprocess.PIPE:
            return self._probe(argv)
        return self._run(argv)

    def _probe(self, argv):
        self.probe_calls.append(" ".join(argv))
        out = self.probes.get(argv[0])
        if out is None:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        if isinstance(out, int):
            return subprocess.CompletedProcess(argv, out, "", "probe failed\n")
        return subprocess.CompletedProcess(argv, 0, out + "\n", "")

    def _run(self, argv):
        text = " ".join(argv)
        self.events.append(("run", text))

        program = argv[1] if argv[0] == "sudo" else argv[0]
        if program in self.spawn_errors:
            raise FileNotFoundError(2, "No such file or directory", program)
        for needle, code in self.failures.items():
            if needle in text:
                return subprocess.CompletedProcess(argv, code)

        if argv[0] == "curl":
            Path(argv[argv.index("-o") + 1]).write_bytes(b"PK\x03\x04")
        elif argv[:2] == ["git", "clone"]:
            dest = Path(argv[5])
            dest.mkdir(parents=True)
            if self.clone_layout:
                (dest / "lua" / "plugins" / "configs").mkdir(parents=True)
                (dest / "lua" / "plugins" / "configs" / "lspconfig.lua").write_text("-- stock\n")
        return subprocess.CompletedProcess(argv, 0)


@pytest.fixture(autouse=True)
def _release_logging():
    yield
    shutdown_logging()


@pytest.fixture
def fake_shell(monkeypatch):
    shell = FakeShell()
    monkeypatch.setattr(subprocess, "run", shell)

    real_rmtree = shutil.rmtree

    def rmtree(path, *args, **kwargs):
        shell.events.append(("rmtree", str(path)))
        return real_rmtree(path, *args, **kwargs)

    monkeypatch.setattr("nvchad_installer.lib.assets.shutil.rmtree", rmtree)
    return shell


@pytest.fixture
def home(tmp_path, monkeypatch):
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("HOME", str(path))
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def ctx(home, workdir):
    return InstallCtx(cfg=InstallConfig(), home=home, work_dir=workdir)


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "debug.log"


def read_log(path):
    return path.read_text(encoding="utf-8").splitlines()


def error_lines(path):
    return [line for line in read_log(path) if "] ERROR: " in line]
