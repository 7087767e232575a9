"""Small helpers that write characters, strings and numbers to streams."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _out(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string as is."""
    _out(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _out(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _out(stream).write(str(n))


def debug_mark(stream: Optional[TextIO] = None) -> None:
    """Write a fixed marker line, to standard error by default."""
    (sys.stderr if stream is None else stream).write("cucufu\n")


def print_array(items: Iterable[str], stream: Optional[TextIO] = None) -> None:
    """Write each item followed by a space, then end the line."""
    out = _out(stream)
    for item in items:
        out.write(f"{item} ")
    out.write("\n")