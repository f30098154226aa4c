"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .printf import format_int


def _target(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string as it is."""
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write a number as a signed 32-bit decimal."""
    _target(stream).write(format_int(number))