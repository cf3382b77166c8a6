"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parse import ArgumentError, parse_arguments
from .simulation import simulate


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the arguments and run the simulation; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError as error:
        print(error)
        return 1
    simulate(settings, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())