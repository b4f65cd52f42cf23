"""Shared test fixtures for ocd."""

from __future__ import annotations

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from ocd.config.environment import Environment


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run for docker commands."""
    mock = mocker.patch("subprocess.run")
    mock.return_value = MagicMock(returncode=0, stdout="", stderr="")
    return mock


@pytest.fixture
def home_dir(tmp_path) -> Path:
    """A fake home directory with nothing in it."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def work_dir(tmp_path) -> Path:
    """An existing project directory used as the process cwd."""
    work = tmp_path / "project"
    work.mkdir()
    return work


@pytest.fixture
def launcher_dir(tmp_path) -> Path:
    """A launcher directory holding a Dockerfile (no AGENTS.md)."""
    launcher = tmp_path / "launcher"
    launcher.mkdir()
    (launcher / "Dockerfile").write_text("FROM node:22-slim\n")
    return launcher


@pytest.fixture
def make_env(home_dir, work_dir, launcher_dir):
    """Factory for Environment snapshots rooted in tmp_path."""

    def _make(**overrides) -> Environment:
        values = dict(
            home=home_dir,
            cwd=work_dir,
            term="xterm",
            credentials={},
            stdin_isatty=False,
            stdout_isatty=False,
            launcher_dir=launcher_dir,
        )
        values.update(overrides)
        return Environment(**values)

    return _make


@pytest.fixture
def fake_env(make_env) -> Environment:
    """Default Environment snapshot."""
    return make_env()


@pytest.fixture
def mock_runtime(mocker):
    """Mock DockerRuntime with a running daemon and an existing image."""
    from ocd.docker.runtime import DockerRuntime

    runtime = MagicMock(spec=DockerRuntime)
    runtime.binary = "docker"
    runtime.check_available.return_value = None
    runtime.image_exists.return_value = True
    runtime.build_image.return_value = 0
    runtime.run.return_value = 0
    return runtime
