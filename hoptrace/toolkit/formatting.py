"""A small printf-style formatter with the %c %s %p %d %i %u %x %X %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_INT_MIN = -(1 << 31)
_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def format_signed(n: int) -> str:
    """Format a value as a signed 32-bit decimal, wrapping as C's int does."""
    value = _require_int(n)
    wrapped = ((value - _INT_MIN) & _UINT_MASK) + _INT_MIN
    return str(wrapped)


def format_unsigned(n: int) -> str:
    """Format a value as an unsigned 32-bit decimal."""
    return str(_require_int(n) & _UINT_MASK)


def format_hex(n: int, upper: bool = False) -> str:
    """Format a value as unsigned 32-bit hexadecimal without a prefix."""
    value = _require_int(n) & _UINT_MASK
    return f"{value:X}" if upper else f"{value:x}"


def format_pointer(ptr: int) -> str:
    """Format an address as ``0x`` plus lower-case hex, or ``(nil)`` for zero."""
    value = _require_int(ptr) & _PTR_MASK
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(_require_int(arg) & 0xFF)


def _format_str(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a string, got {type(arg).__name__}")
    return arg


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_str,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda arg: format_hex(arg, False),
    "X": lambda arg: format_hex(arg, True),
}


def _pieces(template: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown or missing conversion: both characters are dropped.
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise ValueError(
                f"not enough arguments for format string {template!r}"
            ) from None
        yield convert(arg)


def format_string(template: str, *args: Any) -> str:
    """Expand the conversions in ``template`` with ``args`` and return the text.

    Unknown conversions produce no output; extra arguments are ignored.
    """
    if not isinstance(template, str):
        raise TypeError(f"expected a string, got {type(template).__name__}")
    return "".join(_pieces(template, args))


def print_formatted(
    template: str, *args: Any, stream: Optional[TextIO] = None
) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(template, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)