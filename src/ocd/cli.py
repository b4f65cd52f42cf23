"""Command-line interface for ocd."""

from __future__ import annotations

import argparse
import sys

from ocd import __version__
from ocd.config import Environment, resolve_config
from ocd.docker import DockerRuntime
from ocd.exceptions import MissingValueError, OcdError, UnknownOptionError, UsageError
from ocd.output import error, setup_logging

PASSTHROUGH_SEPARATOR = "--"

# Launcher option tokens, matched exactly (no grouping, no --opt=value)
PATH_OPTIONS = ("-c", "--config", "-d", "--data", "-w", "--workdir")
SWITCH_OPTIONS = ("-b", "--build", "-s", "--shell", "--debug")
EXIT_OPTIONS = ("-h", "--help", "-V", "--version")


class LauncherParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> LauncherParser:
    """Build argument parser."""
    parser = LauncherParser(
        prog="ocd",
        usage="%(prog)s [OPTIONS] [-- OPENCODE_ARGS...]",
        description="Run opencode in an isolated Docker container",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  ocd                           # run in current directory
  ocd -c /path/to/config        # use custom config
  ocd -w /path/to/project       # run in specific directory
  ocd -s                        # start shell for debugging
  ocd -- --help                 # pass args to opencode
""",
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        help="Use custom config directory (overrides ~/.config/opencode)",
    )
    parser.add_argument(
        "-d",
        "--data",
        metavar="PATH",
        help="Use custom data directory (overrides ~/.local/share/opencode)",
    )
    parser.add_argument(
        "-w",
        "--workdir",
        metavar="PATH",
        help="Use custom working directory (default: current directory)",
    )
    parser.add_argument(
        "-b", "--build", action="store_true", help="Force rebuild the Docker image before running"
    )
    parser.add_argument(
        "-s", "--shell", action="store_true", help="Start a shell instead of opencode"
    )
    parser.add_argument("--debug", action="store_true", help="Debug mode")

    return parser


def split_passthrough(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first bare `--`.

    Returns (launcher_args, tool_args); the separator itself is dropped.
    """
    if PASSTHROUGH_SEPARATOR in argv:
        idx = argv.index(PASSTHROUGH_SEPARATOR)
        return argv[:idx], argv[idx + 1:]
    return argv, []


def check_launcher_args(tokens: list[str]) -> None:
    """Walk launcher tokens left to right, one option per token.

    Stops at the first help/version flag so it wins over anything after it.
    A path option consumes the next token as its value.

    Raises:
        UnknownOptionError: On an unrecognized token before any help flag.
        MissingValueError: When a path option's value is absent, empty,
            or starts with ``-``.
    """
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in EXIT_OPTIONS:
            return
        if token in PATH_OPTIONS:
            value = tokens[i + 1] if i + 1 < len(tokens) else ""
            if not value or value.startswith("-"):
                raise MissingValueError(token)
            i += 2
        elif token in SWITCH_OPTIONS:
            i += 1
        else:
            raise UnknownOptionError(token)


def parse_arguments(
    argv: list[str], parser: argparse.ArgumentParser | None = None
) -> argparse.Namespace:
    """Parse launcher flags; everything after `--` lands in ``tool_args``.

    Tokens after the separator never reach the parser.

    Raises:
        UnknownOptionError: On an unrecognized flag or stray positional.
        MissingValueError: When a path flag has no usable value.
    """
    if parser is None:
        parser = build_parser()

    launcher_args, tool_args = split_passthrough(list(argv))
    check_launcher_args(launcher_args)
    args = parser.parse_args(launcher_args)

    args.tool_args = tool_args
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        return _main(argv)
    except UnknownOptionError as e:
        error(e.message, exit_now=False)
        build_parser().print_help()
        return e.exit_code
    except OcdError as e:
        error(e.message, exit_now=False)
        return e.exit_code
    except KeyboardInterrupt:
        return 130


def _main(
    argv: list[str] | None = None,
    env: Environment | None = None,
    runtime: DockerRuntime | None = None,
) -> int:
    """Internal main function that may raise OcdError."""
    if argv is None:
        argv = sys.argv[1:]

    args = parse_arguments(argv)
    setup_logging(debug=args.debug)

    if env is None:
        env = Environment.capture()

    config = resolve_config(args, env)

    if runtime is None:
        runtime = DockerRuntime()

    from ocd.commands.build import ensure_image
    from ocd.commands.run import run_container

    ensure_image(runtime, config, env)
    return run_container(runtime, config, env)


if __name__ == "__main__":
    sys.exit(main())
