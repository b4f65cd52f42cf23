"""Assemble the `docker run` argument vector."""

from __future__ import annotations

from ocd.config.environment import CREDENTIAL_VARS, Environment
from ocd.config.resolved import TOOL_NAME, ResolvedConfig

# Container user home directory (change if the image runs as non-root)
CONTAINER_HOME = "/root"
CONTAINER_WORK_DIR = "/work"
CONTAINER_CONFIG_DIR = f"{CONTAINER_HOME}/.config/{TOOL_NAME}"
CONTAINER_DATA_DIR = f"{CONTAINER_HOME}/.local/share/{TOOL_NAME}"
CONTAINER_CONTEXT_FILE = f"{CONTAINER_CONFIG_DIR}/AGENTS.md"

DEFAULT_TERM = "xterm-256color"
SHELL_COMMAND = "/bin/bash"


def tty_flags(env: Environment) -> list[str]:
    """Use -it on a terminal; plain -i so piped runs don't wait for a pty."""
    return ["-it"] if env.interactive else ["-i"]


def mount_args(config: ResolvedConfig) -> list[str]:
    """Work, config and data mounts plus the container working directory."""
    return [
        "-v", f"{config.work_dir}:{CONTAINER_WORK_DIR}",
        "-v", f"{config.config_dir}:{CONTAINER_CONFIG_DIR}",
        "-v", f"{config.data_dir}:{CONTAINER_DATA_DIR}",
        "-w", CONTAINER_WORK_DIR,
    ]


def context_mount_args(env: Environment) -> list[str]:
    """Read-only AGENTS.md mount, or nothing if the file is absent."""
    if env.context_file.is_file():
        return ["-v", f"{env.context_file}:{CONTAINER_CONTEXT_FILE}:ro"]
    return []


def credential_args(env: Environment) -> list[str]:
    """Forward credential variables that are set and non-empty."""
    args = []
    for name in CREDENTIAL_VARS:
        value = env.credentials.get(name)
        if value:
            args.extend(["-e", f"{name}={value}"])
    return args


def container_command(config: ResolvedConfig) -> list[str]:
    """The command run inside the container."""
    if config.shell_mode:
        return [SHELL_COMMAND]
    return [TOOL_NAME, *config.tool_args]


def build_run_command(config: ResolvedConfig, env: Environment) -> list[str]:
    """Build the arguments that follow `docker run`.

    Order: --rm, tty mode, work/config/data mounts, -w, TERM, optional
    context file mount, credential variables, image, command.
    """
    args = ["--rm", *tty_flags(env)]
    args.extend(mount_args(config))
    args.extend(["-e", f"TERM={env.term or DEFAULT_TERM}"])
    args.extend(context_mount_args(env))
    args.extend(credential_args(env))
    args.append(config.image_name)
    args.extend(container_command(config))
    return args
