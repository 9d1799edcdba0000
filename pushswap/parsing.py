"""Validating and parsing the push_swap command-line numbers."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.convert import split

INT_MIN = -2147483648
INT_MAX = 2147483647


class InputError(ValueError):
    """Raised when the program input is not a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def validate_arguments(args: Iterable[str]) -> bool:
    """True if every argument is an optional sign followed by at least one digit."""
    for arg in args:
        body = arg[1:] if arg[:1] in ("-", "+") else arg
        if not body or not all(_is_digit(char) for char in body):
            return False
    return True


def validate_format(text: str) -> bool:
    """Check a single space-separated list of numbers.

    Numbers may carry one sign and are separated by single spaces; the
    text may not end on a non-digit.
    """
    length = len(text)
    if length == 0:
        return False

    def at(index: int) -> str:
        return text[index] if index < length else ""

    i = 0
    if at(0) in ("-", "+") and _is_digit(at(1)):
        i += 1
    while i < length:
        char = text[i]
        if not _is_digit(char):
            following = at(i + 1)
            if not following:
                return False
            if char == " " and (_is_digit(following) or following in ("-", "+")):
                i += 1
            else:
                return False
        i += 1
    return True


def parse_int(text: str) -> int:
    """Parse an optional sign and leading digits; raise InputError outside 32-bit range."""
    position = 0
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        position = 1
    result = 0
    while position < len(text) and _is_digit(text[position]):
        result = result * 10 + (ord(text[position]) - ord("0"))
        position += 1
    result *= sign
    if not INT_MIN <= result <= INT_MAX:
        raise InputError()
    return result


def has_duplicates(values: Sequence[int]) -> bool:
    """True if some value occurs more than once."""
    return len(set(values)) != len(values)


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn the program arguments into the list of numbers to sort.

    A single argument is read as a space-separated list. Raises InputError
    for missing, malformed, out-of-range or duplicate numbers.
    """
    args = list(args)
    if not args or args[0] in ("", " "):
        raise InputError()
    if (len(args) > 1 and not validate_arguments(args)) or not validate_format(args[0]):
        raise InputError()
    tokens = split(args[0], " ") if len(args) == 1 else args
    values = [parse_int(token) for token in tokens]
    if has_duplicates(values):
        raise InputError()
    return values


def to_indices(values: Sequence[int]) -> List[int]:
    """Replace every value by its rank (0 for the smallest).

    Equal values are ranked in the order they appear.
    """
    order = sorted(range(len(values)), key=lambda index: values[index])
    ranks = [0] * len(values)
    for rank, index in enumerate(order):
        ranks[index] = rank
    return ranks