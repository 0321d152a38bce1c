"""CLI entry point for stickman."""

from __future__ import annotations

import sys

if sys.version_info < (3, 12):  # noqa: UP036
    print("Error: stickman requires Python 3.12 or higher.")
    print(
        "You are running Python {}.{}".format(  # noqa: UP032
            sys.version_info.major, sys.version_info.minor
        )
    )
    sys.exit(1)

from stickman.cli import cli  # noqa: E402


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
