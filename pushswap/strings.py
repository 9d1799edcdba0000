"""String search, comparison, bounded copy and per-character mapping helpers."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_size(size: int, what: str) -> None:
    if size < 0:
        raise ValueError(f"{what} must not be negative, got {size}")


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters, empty when
    ``size`` is 0) and the full length of ``src``. A returned length of
    ``size`` or more means the copy was truncated.
    """
    _check_size(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have needed. When ``size`` is 0 the length of ``src`` is returned; when
    ``size`` does not exceed the length of ``dst`` nothing is appended and
    ``len(src) + size`` is returned.
    """
    _check_size(size, "size")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points at the first mismatch, with
    the end of a string counting as code point 0; returns 0 when the
    compared parts are equal.
    """
    _check_size(n, "n")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(c)
    if target == "\0":
        position = text.find(target)
        return len(text) if position < 0 else position
    position = text.find(target)
    return None if position < 0 else position


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character gives the start of the string.
    """
    target = _char(c)
    if target == "\0":
        return 0
    position = text.rfind(target)
    return None if position < 0 else position


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence, func: Callable[[int, object], Optional[object]]
) -> None:
    """Call ``func(index, item)`` on every item of ``text`` in place.

    When ``func`` returns something other than None, it replaces the item.
    """
    for index, item in enumerate(list(text)):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement