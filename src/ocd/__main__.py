"""Entry point for python -m ocd."""

import sys


def main():
    from ocd.cli import main as cli_main

    sys.exit(cli_main())


if __name__ == "__main__":
    main()
