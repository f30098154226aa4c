"""Checking and reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MAX_INT = "2147483647"
_MIN_INT = "-2147483648"


class InputError(ValueError):
    """The arguments do not describe a valid stack."""


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_number(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed by digits only.

    A lone sign is not a number; an empty string passes this check.
    """
    digits = text
    if text[:1] in ("-", "+"):
        if len(text) == 1:
            return False
        digits = text[1:]
    return all(_is_digit(c) for c in digits)


def exceeds_limit(text: str) -> bool:
    """Tell whether a numeric string is too long or beyond the 32-bit range."""
    length = len(text)
    if length > 11:
        return True
    if text.startswith("-") and length == 11:
        return text > _MIN_INT
    return length == 10 and text > _MAX_INT


def correct_format(text: str) -> bool:
    """Reject empty strings and strings holding a double quote."""
    return bool(text) and '"' not in text


def to_int(text: str) -> int:
    """Read a signed decimal prefix of ``text`` as a 32-bit integer.

    Anything malformed at the start reads as 0; values wrap to 32 bits.
    """
    pos = 0
    sign = 1

    def at(i: int) -> str:
        return text[i] if i < len(text) else ""

    if at(0) == "-":
        if at(1) == "+":
            return 0
        sign = -1
        pos = 1
    first = at(pos)
    if not (first and _is_digit(first)) and first != "+":
        return 0
    if first == "+":
        pos += 1
    result = 0
    while at(pos) and _is_digit(at(pos)):
        result = result * 10 + int(at(pos))
        pos += 1
    result = (result * sign) & 0xFFFFFFFF
    return result - (1 << 32) if result >= 1 << 31 else result


def check_duplicates(values: Iterable[int]) -> None:
    """Raise InputError if any value appears twice."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value {value}")
        seen.add(value)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the values of stack *a*, top first.

    A single argument is split on spaces. Every word must be a number within
    the 32-bit range and the values must be distinct, else InputError.
    """
    if not args:
        raise InputError("no arguments")
    words = [w for w in args[0].split(" ") if w] if len(args) == 1 else list(args)
    for word in words:
        if not is_number(word) or exceeds_limit(word) or not correct_format(word):
            raise InputError(f"invalid argument {word!r}")
    if not words:
        raise InputError("no numbers given")
    values = [to_int(word) for word in words]
    check_duplicates(values)
    return values