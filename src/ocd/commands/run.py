"""Container run command."""

from __future__ import annotations

from ocd.config.environment import Environment
from ocd.config.resolved import ResolvedConfig
from ocd.docker.invocation import build_run_command
from ocd.docker.runtime import DockerRuntime
from ocd.exceptions import RunFailedError
from ocd.output import debug, info
from ocd.utils import exit_status, signal_name


def run_container(
    runtime: DockerRuntime,
    config: ResolvedConfig,
    env: Environment,
) -> int:
    """Run the tool (or a shell) in the container and wait for it.

    Returns 0 when the container exits cleanly.

    Raises:
        RunFailedError: If the container exits non-zero. Its exit_code
            carries the container's status.
    """
    args = build_run_command(config, env)

    if config.shell_mode:
        info("Starting shell in container...")

    info(f"Work directory: {config.work_dir}")
    info(f"Config directory: {config.config_dir}")
    info(f"Data directory: {config.data_dir}")

    code = runtime.run(args)
    if code != 0:
        sig = signal_name(code)
        if sig:
            debug(f"[run] container terminated by {sig}")
        raise RunFailedError(exit_status(code))
    return 0
