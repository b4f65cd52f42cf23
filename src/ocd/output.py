"""Colored output utilities and logging."""

from __future__ import annotations

import logging
import sys

from ocd.utils import is_terminal

# ANSI color codes
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
DIM = "\033[2m"
NC = "\033[0m"  # No color / reset

# Module logger
_logger = logging.getLogger("ocd")


class TaggedFormatter(logging.Formatter):
    """Prefix records with a dimmed level tag, e.g. ``[DEBUG] msg``."""

    def format(self, record: logging.LogRecord) -> str:
        return f"{_tag(DIM, record.levelname)} {super().format(record)}"


def setup_logging(debug: bool = False) -> None:
    """Send the ocd logger to stderr at DEBUG with --debug, else WARNING."""
    _logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(TaggedFormatter("%(message)s"))
        _logger.addHandler(handler)


def debug(msg: str) -> None:
    """Log debug message (only shown with --debug flag)."""
    _logger.debug(msg)


def _supports_color(stream: object = None) -> bool:
    """Check if stream (default stderr) is a terminal."""
    return is_terminal(sys.stderr if stream is None else stream)


def _tag(color: str, label: str) -> str:
    """Return a severity tag like [INFO], colored if stderr is a TTY."""
    if _supports_color():
        return f"{color}[{label}]{NC}"
    return f"[{label}]"


def error(msg: str, *, exit_now: bool = True) -> None:
    """Print error message and optionally exit.

    Args:
        msg: The error message to print.
        exit_now: If True (default), exit with code 1 after printing.
    """
    print(f"{_tag(RED, 'ERROR')} {msg}", file=sys.stderr)
    if exit_now:
        sys.exit(1)


def warn(msg: str) -> None:
    """Print warning message."""
    print(f"{_tag(YELLOW, 'WARN')} {msg}", file=sys.stderr)


def info(msg: str) -> None:
    """Print info message."""
    print(f"{_tag(GREEN, 'INFO')} {msg}", file=sys.stderr)


def success(msg: str) -> None:
    """Print success message."""
    print(f"{_tag(GREEN, 'OK')} {msg}", file=sys.stderr)
