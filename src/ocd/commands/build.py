"""Image availability gate: build the image when missing or forced."""

from __future__ import annotations

from ocd.config.environment import Environment
from ocd.config.resolved import ResolvedConfig
from ocd.docker.runtime import DockerRuntime
from ocd.exceptions import BuildDescriptorMissingError, BuildFailedError
from ocd.output import debug, info, success


def needs_build(runtime: DockerRuntime, config: ResolvedConfig) -> bool:
    """Return True if the image is absent or a rebuild was requested."""
    exists = runtime.image_exists(config.image_name)
    debug(f"[build] image {config.image_name} exists={exists} force={config.force_build}")
    return config.force_build or not exists


def ensure_image(
    runtime: DockerRuntime,
    config: ResolvedConfig,
    env: Environment,
) -> bool:
    """Make sure the image exists, building it if needed.

    The daemon is checked before the image is queried.

    Returns:
        True if a build was run, False if the existing image was reused.

    Raises:
        RuntimeUnavailableError: If the daemon cannot be reached.
        BuildDescriptorMissingError: If the packaged Dockerfile is missing.
        BuildFailedError: If `docker build` exits non-zero.
    """
    runtime.check_available()

    if not needs_build(runtime, config):
        return False

    info("Building Docker image...")

    dockerfile = env.dockerfile
    if not dockerfile.is_file():
        raise BuildDescriptorMissingError(f"Dockerfile not found at {dockerfile}")

    code = runtime.build_image(config.image_name, dockerfile, env.launcher_dir)
    if code != 0:
        raise BuildFailedError(f"Docker image build failed (exit code {code})")

    success("Docker image built successfully.")
    return True
