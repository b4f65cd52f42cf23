"""Snapshot of the process environment the launcher reads."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from ocd.utils import is_terminal

# Credential variables forwarded into the container when set
CREDENTIAL_VARS = ("ANTHROPIC_API_KEY", "OPENAI_API_KEY")

# Directory holding the packaged Dockerfile and optional AGENTS.md
LAUNCHER_DIR = Path(__file__).resolve().parent.parent / "container"


@dataclass(frozen=True)
class Environment:
    """Everything the resolver and invocation builder read from the host.

    Built once per run by ``capture()``; tests construct it directly.
    """

    home: Path
    cwd: Path
    term: str | None = None
    credentials: dict[str, str] = field(default_factory=dict)
    stdin_isatty: bool = False
    stdout_isatty: bool = False
    launcher_dir: Path = LAUNCHER_DIR

    @property
    def interactive(self) -> bool:
        """True when both stdin and stdout are attached to a terminal."""
        return self.stdin_isatty and self.stdout_isatty

    @property
    def dockerfile(self) -> Path:
        return self.launcher_dir / "Dockerfile"

    @property
    def context_file(self) -> Path:
        return self.launcher_dir / "AGENTS.md"

    @classmethod
    def capture(cls, environ: dict[str, str] | None = None) -> "Environment":
        """Capture the current process environment."""
        if environ is None:
            environ = dict(os.environ)

        credentials = {
            name: environ[name] for name in CREDENTIAL_VARS if environ.get(name)
        }

        return cls(
            home=Path.home(),
            cwd=Path.cwd(),
            term=environ.get("TERM") or None,
            credentials=credentials,
            stdin_isatty=is_terminal(sys.stdin),
            stdout_isatty=is_terminal(sys.stdout),
        )
