"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.parsing import InputError, parse_arguments, to_indices
from pushswap.sorting import radix_sort, sort_small
from pushswap.stacks import Stacks

_SMALL_LIMIT = 5


def solve(args: Sequence[str]) -> List[str]:
    """Return the operations that sort the numbers given as ``args``.

    Already sorted input gives an empty list. Raises InputError for
    invalid input.
    """
    values = parse_arguments(args)
    if Stacks(values).is_sorted():
        return []
    stacks = Stacks(to_indices(values))
    if len(stacks.a) <= _SMALL_LIMIT:
        sort_small(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line.

    Invalid input writes "Error" to standard error and returns 1. Input
    that is already sorted prints nothing and also returns 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        operations = solve(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if not operations:
        return 1
    sys.stdout.write("".join(f"{name}\n" for name in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())