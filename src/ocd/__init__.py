"""ocd - Run opencode in an isolated Docker container."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ocd")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for source checkouts without metadata
