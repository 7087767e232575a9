"""String slicing, joining, trimming, splitting and bounded copies."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple


def _require_str(*values: object) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end of the string yields an empty string.
    """
    _require_str(s)
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def str_join(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    _require_str(s1, s2)
    return s1 + s2


def str_trim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that occurs in ``charset``."""
    _require_str(s, charset)
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    _require_str(s, sep)
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def str_mapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    _require_str(s)
    return "".join(func(index, char) for index, char in enumerate(s))


def str_iteri(
    s: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each element of a mutable character sequence.

    When ``func`` returns a value other than None, it replaces the element
    in place.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("expected a mutable sequence of characters")
    for index, char in enumerate(list(s)):
        replacement = func(index, char)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``, which lets a
    caller detect truncation. A size of 0 copies nothing.
    """
    _require_str(src)
    _require_non_negative("size", size)
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the resulting text and the length the concatenation would have
    had with unlimited room (``min(len(dst), size) + len(src)``). When
    ``dst`` already fills the space, it is returned unchanged.
    """
    _require_str(dst, src)
    _require_non_negative("size", size)
    used = min(len(dst), size)
    if used < size:
        result = dst[:used] + src[:size - used - 1]
    else:
        result = dst
    return result, used + len(src)