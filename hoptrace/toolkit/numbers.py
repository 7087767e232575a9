"""Lenient integer parsing and integer formatting."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdef"


def atoi(text: str) -> int:
    """Parse a decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is honoured and
    digits are read until the first non-digit. Text without digits
    yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def atoi_base(text: str, base: int) -> int:
    """Parse an integer in ``base`` (2 to 16), stopping at the first bad digit.

    A leading ``-`` makes the result negative. Letters may be in either
    case. Text without valid digits yields 0.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    valid = _DIGITS[:base]
    sign = 1
    rest = text
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest.lower():
        digit = valid.find(ch)
        if digit < 0:
            break
        value = value * base + digit
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)