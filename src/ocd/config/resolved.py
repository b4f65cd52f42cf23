"""Resolved configuration after CLI > default merging."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

from ocd.config.environment import Environment
from ocd.exceptions import PathCreationError, PathError, PathNotFoundError
from ocd.output import debug, info, warn
from ocd.utils import expand_path

IMAGE_NAME = "opencode-container:latest"
TOOL_NAME = "opencode"


@dataclass(frozen=True)
class ResolvedConfig:
    """Fully resolved launch settings.

    The three directories are absolute, existing and symlink-resolved.
    """

    work_dir: Path
    config_dir: Path
    data_dir: Path
    force_build: bool = False
    shell_mode: bool = False
    tool_args: tuple[str, ...] = ()
    image_name: str = field(default=IMAGE_NAME, init=False)


def default_config_dir(home: Path) -> Path:
    return home / ".config" / TOOL_NAME


def default_data_dir(home: Path) -> Path:
    return home / ".local" / "share" / TOOL_NAME


def resolve_work_dir(value: str | None, env: Environment) -> Path:
    """Resolve the working directory, which must already exist.

    Raises PathNotFoundError if it is missing or not a directory, and
    PathError if it cannot be inspected.
    """
    path = expand_path(value, env.cwd, env.home) if value else env.cwd
    try:
        exists = path.is_dir()
    except OSError as e:
        raise PathError(f"Cannot access working directory {path}: {e.strerror or e}")
    if not exists:
        raise PathNotFoundError(f"Working directory does not exist: {value or path}")
    return path.resolve()


def ensure_directory(path: Path, label: str) -> Path:
    """Create ``path`` (with parents) if missing and return its canonical form.

    Existing directories are left as they are.
    """
    try:
        if not path.is_dir():
            warn(f"{label.capitalize()} directory does not exist: {path}")
            info(f"Creating {label} directory...")
            path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PathCreationError(
            f"Could not create {label} directory {path}: {e.strerror or e}"
        )
    return path.resolve()


def _pick_dir(cli_val: str | None, default: Path, env: Environment) -> Path:
    """Pick a directory with priority: CLI > default."""
    if cli_val:
        return expand_path(cli_val, env.cwd, env.home)
    return default


def resolve_config(args: argparse.Namespace, env: Environment) -> ResolvedConfig:
    """Create a ResolvedConfig from parsed CLI args and the environment.

    The work dir is checked before anything is created, so a missing work
    dir never leaves new directories behind.
    """
    work_dir = resolve_work_dir(args.workdir, env)

    config_dir = _pick_dir(args.config, default_config_dir(env.home), env)
    data_dir = _pick_dir(args.data, default_data_dir(env.home), env)

    config_dir = ensure_directory(config_dir, "config")
    data_dir = ensure_directory(data_dir, "data")

    debug(f"[resolve] work={work_dir} config={config_dir} data={data_dir}")

    return ResolvedConfig(
        work_dir=work_dir,
        config_dir=config_dir,
        data_dir=data_dir,
        force_build=bool(args.build),
        shell_mode=bool(args.shell),
        tool_args=tuple(args.tool_args),
    )
