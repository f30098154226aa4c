"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def hex_len(number: int) -> int:
    """Return the number of hexadecimal digits of a non-negative number."""
    return len(to_hex(number))


def to_hex(number: int, upper: bool = False) -> str:
    """Write a non-negative number in hexadecimal, lower case unless ``upper``."""
    if number < 0:
        raise ValueError("negative number")
    return format(number, "X" if upper else "x")


def format_unsigned(number: int) -> str:
    """Write a number as an unsigned 32-bit decimal."""
    return str(number & _MASK32)


def format_int(number: int) -> str:
    """Write a number as a signed 32-bit decimal."""
    number &= _MASK32
    if number >= 1 << 31:
        number -= 1 << 32
    return str(number)


def format_pointer(address: int | None) -> str:
    """Write an address as ``0x`` and hex digits, or ``(nil)`` for none."""
    if not address:
        return "(nil)"
    return "0x" + to_hex(address & _MASK64)


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        return arg[:1]
    return chr(arg & 0xFF)


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``fmt`` and ``args`` produce.

    An unknown conversion, and a lone ``%`` at the end, produce nothing.
    """
    values = iter(args)

    def next_arg() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "c":
            out.append(_format_char(next_arg()))
        elif spec == "s":
            arg = next_arg()
            out.append("(null)" if arg is None else str(arg))
        elif spec == "p":
            out.append(format_pointer(next_arg()))
        elif spec in ("d", "i"):
            out.append(format_int(next_arg()))
        elif spec == "u":
            out.append(format_unsigned(next_arg()))
        elif spec == "x":
            out.append(to_hex(next_arg() & _MASK32))
        elif spec == "X":
            out.append(to_hex(next_arg() & _MASK32, upper=True))
        elif spec == "%":
            out.append("%")
    return "".join(out)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered text to ``stream`` (stdout by default); return its length."""
    text = render(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)