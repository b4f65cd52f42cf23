"""Docker runtime access and run-command assembly."""

from ocd.docker.invocation import build_run_command
from ocd.docker.runtime import DockerRuntime

__all__ = ["DockerRuntime", "build_run_command"]
