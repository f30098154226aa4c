"""String helpers: conversion, splitting, searching, copying and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

from .printf import format_int

Char = Union[int, str]

_SPACES = frozenset("\t\n\v\f\r ")


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"negative {name} {value}")


def _wrap32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - (1 << 32) if number >= 1 << 31 else number


def atoi(text: str) -> int:
    """Read a decimal integer after leading white space and one optional sign.

    Reading stops at the first non-digit; no digits read as 0. The result
    wraps to 32 bits.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if text[pos:pos + 1] == "-":
        sign = -1
        pos += 1
    elif text[pos:pos + 1] == "+":
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = result * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return _wrap32(result * sign)


def itoa(number: int) -> str:
    """Write a number as a signed 32-bit decimal."""
    return format_int(number)


def count_words(text: str, sep: Char) -> int:
    """Count the non-empty runs of ``text`` between separators."""
    return len(split(text, sep))


def split(text: str, sep: Char) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(_char(sep)) if word]


def str_chr(text: str, c: Char) -> Optional[int]:
    """Return the position of the first ``c`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    pos = text.find(ch)
    return None if pos < 0 else pos


def str_rchr(text: str, c: Char) -> Optional[int]:
    """Return the position of the last ``c`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    pos = text.rfind(ch)
    return None if pos < 0 else pos


def str_dup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def str_join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def str_lcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Return the new buffer contents and the length of ``src``. With a size of
    0 the buffer is left as it was.
    """
    _check_size(size, "size")
    if size == 0:
        return dest, len(src)
    return src[:size - 1], len(src)


def str_lcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Return the new buffer contents and the length the whole string would
    have had, counting at most ``size`` for ``dest``.
    """
    _check_size(size, "size")
    dest_len = len(dest)
    result = dest
    if size > 0 and dest_len < size - 1:
        result = dest + src[:size - 1 - dest_len]
    return result, min(dest_len, size) + len(src)


def str_len(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def str_mapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(position, character)`` for each character."""
    return "".join(func(pos, ch) for pos, ch in enumerate(text))


def str_iteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(position, character)`` on each character of ``chars``.

    Where ``func`` returns a character, it replaces the one in ``chars``.
    """
    for pos, ch in enumerate(chars):
        replacement = func(pos, ch)
        if replacement is not None:
            chars[pos] = replacement


def str_ncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Return the difference of the codes at the first mismatch, where the end
    of a string counts as code 0, or 0 if they agree.
    """
    _check_size(count, "count")
    for pos in range(count):
        a = ord(first[pos]) if pos < len(first) else 0
        b = ord(second[pos]) if pos < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def str_nstr(big: str, little: str, length: int) -> Optional[int]:
    """Return where ``little`` first occurs wholly within ``big[:length]``, or None.

    An empty ``little`` is found at position 0.
    """
    _check_size(length, "length")
    if not little:
        return 0
    pos = big[:length].find(little)
    return None if pos < 0 else pos


def str_trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]