"""ASCII character classification and case conversion.

Every function takes a character code (an ``int``) or a one-character string.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, shift: int, low: int, high: int) -> Char:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Return the lower-case form of an upper-case ASCII letter, else ``c`` unchanged."""
    return _convert(c, 32, 65, 90)


def to_upper(c: Char) -> Char:
    """Return the upper-case form of a lower-case ASCII letter, else ``c`` unchanged."""
    return _convert(c, -32, 97, 122)