"""Shared fixtures: a fake XDG home with omarchy themes and fake processes."""

import subprocess

import pytest
from xdg import BaseDirectory

from vchange.settings import Settings


@pytest.fixture
def xdg_home(tmp_path, monkeypatch):
    """Point pyxdg's base directories into tmp_path."""
    config_home = tmp_path / ".config"
    data_home = tmp_path / ".local" / "share"
    state_home = tmp_path / ".local" / "state"
    for d in (config_home, data_home, state_home):
        d.mkdir(parents=True)
    monkeypatch.setattr(BaseDirectory, "xdg_config_home", str(config_home))
    monkeypatch.setattr(BaseDirectory, "xdg_data_home", str(data_home))
    monkeypatch.setattr(BaseDirectory, "xdg_state_home", str(state_home))
    return tmp_path


@pytest.fixture
def omarchy(xdg_home):
    """User themes 'nord' (active, with preview) and local theme 'gruvbox'."""
    user_root = xdg_home / ".config" / "omarchy" / "themes"
    local_root = xdg_home / ".local" / "share" / "omarchy" / "themes"

    nord = user_root / "nord"
    (nord / "backgrounds").mkdir(parents=True)
    (nord / "preview.png").write_bytes(b"\x89PNG")
    (nord / "backgrounds" / "b.jpg").write_bytes(b"\xff\xd8")
    (nord / "backgrounds" / "a.png").write_bytes(b"\x89PNG")

    gruvbox = local_root / "gruvbox"
    (gruvbox / "backgrounds").mkdir(parents=True)
    (gruvbox / "backgrounds" / "forest.webp").write_bytes(b"RIFF")

    current = xdg_home / ".config" / "omarchy" / "current"
    current.mkdir(parents=True)
    (current / "theme").symlink_to(nord)
    return xdg_home


@pytest.fixture
def settings(omarchy) -> Settings:
    return Settings(
        theme_roots=(
            omarchy / ".config" / "omarchy" / "themes",
            omarchy / ".local" / "share" / "omarchy" / "themes",
        ),
        current_theme_link=omarchy / ".config" / "omarchy" / "current" / "theme",
    )


class FakeProcesses:
    """Records commands given to subprocess.run / subprocess.Popen."""

    def __init__(self):
        self.run_calls: list[list[str]] = []
        self.popen_calls: list[list[str]] = []
        self.popen_kwargs: list[dict] = []
        self.returncodes: dict[str, int] = {}
        self.stderr: dict[str, str] = {}
        self.missing: set[str] = set()
        self.on_run = {}

    def run(self, cmd, capture_output=False, text=False, check=False, **kwargs):
        self.run_calls.append(list(cmd))
        if cmd[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        rc = self.returncodes.get(cmd[0], 0)
        stderr = self.stderr.get(cmd[0], "")
        if check and rc != 0:
            raise subprocess.CalledProcessError(rc, cmd, output="", stderr=stderr)
        if rc == 0 and cmd[0] in self.on_run:
            self.on_run[cmd[0]](cmd)
        return subprocess.CompletedProcess(cmd, rc, "", stderr)

    def popen(self, cmd, **kwargs):
        if cmd[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        self.popen_calls.append(list(cmd))
        self.popen_kwargs.append(kwargs)
        return object()


@pytest.fixture
def processes(monkeypatch) -> FakeProcesses:
    fake = FakeProcesses()
    monkeypatch.setattr(subprocess, "run", fake.run)
    monkeypatch.setattr(subprocess, "Popen", fake.popen)
    return fake
