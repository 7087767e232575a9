"""String length, search, comparison and duplication."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[str, int]

_TERMINATOR = "\0"


def _require_str(*values: object) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c)


def str_len(s: str) -> int:
    """Return the number of characters in ``s``."""
    _require_str(s)
    return len(s)


def str_chr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character yields the index just past the end.
    """
    _require_str(s)
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def str_rchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character yields the index just past the end.
    """
    _require_str(s)
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def str_nstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0. Returns None when not found.
    """
    _require_str(big, little)
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def _compare(s1: str, s2: str) -> int:
    for a, b in zip_longest(s1, s2, fillvalue=_TERMINATOR):
        if a != b:
            return ord(a) - ord(b)
    return 0


def str_cmp(s1: str, s2: str) -> int:
    """Compare two strings character by character.

    Returns the code-point difference at the first mismatch, where the end
    of the shorter string counts as code point 0; 0 when equal.
    """
    _require_str(s1, s2)
    return _compare(s1, s2)


def str_ncmp(s1: str, s2: str, length: int) -> int:
    """Compare at most the first ``length`` characters of two strings."""
    _require_str(s1, s2)
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return _compare(s1[:length], s2[:length])


def str_dup(s: str) -> str:
    """Return a copy of ``s``."""
    _require_str(s)
    return "".join(s)