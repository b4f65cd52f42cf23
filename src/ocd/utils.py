"""Utility functions."""

from __future__ import annotations

import signal
from pathlib import Path


def expand_path(value: str | Path, base: Path, home: Path) -> Path:
    """Make a user-supplied path absolute.

    A leading ``~`` expands against ``home``; other relative paths are
    taken relative to ``base``. The result is not resolved.
    """
    text = str(value)
    if text == "~" or text.startswith("~/"):
        return home / text[2:]
    path = Path(text)
    if path.is_absolute():
        return path
    return base / path


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to a shell-style exit status.

    Negative codes (killed by signal N) become 128 + N.
    """
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode


def signal_name(returncode: int) -> str | None:
    """Return the signal name for a negative return code, if any."""
    if returncode >= 0:
        return None
    try:
        return signal.Signals(-returncode).name
    except ValueError:
        return None


def is_terminal(stream: object) -> bool:
    """Return True if ``stream`` has a callable isatty() that reports a TTY."""
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    return bool(isatty())
