"""Docker command execution."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from ocd.exceptions import RuntimeUnavailableError
from ocd.output import debug

NOT_RUNNING_MESSAGE = "Docker is not running. Please start Docker and try again."


class DockerRuntime:
    """Issue commands to the local Docker daemon."""

    def __init__(self, binary: str = "docker"):
        self.binary = binary

    def check_available(self) -> None:
        """Verify the daemon answers `docker info`.

        Raises RuntimeUnavailableError if the binary is missing or the
        daemon cannot be reached.
        """
        try:
            result = self._capture(["info"])
        except FileNotFoundError:
            raise RuntimeUnavailableError(
                f"'{self.binary}' not found. Please install Docker and try again."
            )
        except OSError as e:
            raise RuntimeUnavailableError(f"Cannot run '{self.binary}': {e.strerror or e}")
        if result.returncode != 0:
            debug(f"[docker] info failed: {result.stderr.strip()}")
            raise RuntimeUnavailableError(NOT_RUNNING_MESSAGE)

    def image_exists(self, name: str) -> bool:
        """Check if an image with this name exists locally."""
        try:
            result = self._capture(["images", "-q", name])
        except OSError:
            raise RuntimeUnavailableError(NOT_RUNNING_MESSAGE)
        return result.returncode == 0 and bool(result.stdout.strip())

    def build_image(self, name: str, dockerfile: Path, context: Path) -> int:
        """Build an image, streaming build output to the terminal.

        Returns exit code.
        """
        return self.run_attached(["build", "-t", name, "-f", str(dockerfile), str(context)])

    def run(self, args: list[str]) -> int:
        """Run a container attached to the caller's stdio.

        ``args`` is the argument vector after ``docker run``.
        Returns exit code.
        """
        return self.run_attached(["run", *args])

    def run_attached(self, args: list[str]) -> int:
        """Execute a docker subcommand, inheriting stdio."""
        cmd = [self.binary, *args]
        debug(f"[docker] exec: {_redact(cmd)}")
        try:
            result = subprocess.run(cmd)
        except FileNotFoundError:
            raise RuntimeUnavailableError(NOT_RUNNING_MESSAGE)
        except OSError as e:
            raise RuntimeUnavailableError(f"Cannot run '{self.binary}': {e.strerror or e}")
        debug(f"[docker] exit={result.returncode}")
        return result.returncode

    def _capture(self, args: list[str]) -> subprocess.CompletedProcess:
        cmd = [self.binary, *args]
        debug(f"[docker] exec: {shlex.join(cmd)}")
        return subprocess.run(cmd, capture_output=True, text=True)


def _redact(cmd: list[str]) -> str:
    """Join a command for logging, hiding values of forwarded variables."""
    parts = []
    for i, part in enumerate(cmd):
        if i > 0 and cmd[i - 1] == "-e" and "=" in part and not part.startswith("TERM="):
            name = part.split("=", 1)[0]
            part = f"{name}=***"
        parts.append(part)
    return shlex.join(parts)
