"""End-to-end CLI tests using subprocess.

These run ocd as a real process for paths that stop before Docker is
ever called.
"""

import subprocess
import sys


def run_ocd(*args: str, cwd=None, env=None) -> subprocess.CompletedProcess:
    """Run ocd CLI as subprocess."""
    return subprocess.run(
        [sys.executable, "-m", "ocd", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
        env=env,
    )


class TestCliSubprocessBasic:
    """Basic subprocess CLI tests."""

    def test_help_flag(self):
        result = run_ocd("--help")
        assert result.returncode == 0
        assert "usage: ocd" in result.stdout

    def test_short_help_flag(self):
        result = run_ocd("-h")
        assert result.returncode == 0
        assert "--shell" in result.stdout

    def test_version_flag(self):
        result = run_ocd("--version")
        assert result.returncode == 0
        assert result.stdout.startswith("ocd ")


class TestCliSubprocessErrors:
    """Errors exit 1 with a single [ERROR] line."""

    def test_unknown_flag(self):
        result = run_ocd("--frobnicate")
        assert result.returncode == 1
        assert "[ERROR] Unknown option: --frobnicate" in result.stderr
        assert "usage: ocd" in result.stdout

    def test_missing_value(self):
        result = run_ocd("--workdir")
        assert result.returncode == 1
        assert "requires a path argument" in result.stderr

    def test_missing_workdir(self, tmp_path):
        env = {"HOME": str(tmp_path), "PATH": ""}
        result = run_ocd("-w", str(tmp_path / "does-not-exist"), env=env)
        assert result.returncode == 1
        assert "Working directory does not exist" in result.stderr
        # Nothing created under HOME
        assert list(tmp_path.iterdir()) == []

    def test_docker_missing(self, tmp_path):
        """With no docker on PATH the launcher fails fast."""
        env = {"HOME": str(tmp_path), "PATH": ""}
        result = run_ocd("-w", str(tmp_path), env=env)
        assert result.returncode == 1
        assert "[ERROR]" in result.stderr
