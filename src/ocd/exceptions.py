"""Exception hierarchy for ocd."""

from __future__ import annotations


class OcdError(Exception):
    """Base exception for all ocd errors.

    Attributes:
        message: Human-readable error message
        exit_code: Suggested exit code for CLI (default 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class UsageError(OcdError):
    """Command-line usage errors."""

    pass


class UnknownOptionError(UsageError):
    """An unrecognized flag or stray token was given before `--`."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Unknown option: {option}")


class MissingValueError(UsageError):
    """A path flag was given without a value."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Option {option} requires a path argument")


class PathError(OcdError):
    """Host path validation errors."""

    pass


class PathNotFoundError(PathError):
    """A path that must already exist does not."""

    pass


class PathCreationError(PathError):
    """A config or data directory could not be created."""

    pass


class DockerError(OcdError):
    """Container runtime errors."""

    pass


class RuntimeUnavailableError(DockerError):
    """The Docker daemon cannot be reached."""

    pass


class BuildDescriptorMissingError(DockerError):
    """The packaged Dockerfile is missing."""

    pass


class BuildFailedError(DockerError):
    """`docker build` exited non-zero."""

    pass


class RunFailedError(DockerError):
    """The container exited non-zero.

    The container's status becomes the exit code, so the launcher relays it.
    """

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"Container exited with status {status}", exit_code=status)
