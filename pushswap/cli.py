"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, read_arguments
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from the arguments and print one operation per line.

    Invalid input prints "Error" on standard error and nothing else.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = read_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{name}\n" for name in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())