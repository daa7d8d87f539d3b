"""String searching, comparison and construction helpers."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_count(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative: {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0" and "\0" not in s:
        return len(s)
    position = s.find(ch)
    return None if position < 0 else position


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    position = s.rfind(ch)
    return None if position < 0 else position


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Return the code difference of the first unequal pair, -1 or 1 when one
    string ends before the other within ``n`` characters, or 0.
    """
    _check_count(n, "count")
    limit = min(n, len(s1), len(s2))
    for a, b in zip(s1[:limit], s2[:limit]):
        if a != b:
            return ord(a) - ord(b)
    if limit < n:
        if len(s1) == limit and len(s2) > limit:
            return -1
        if len(s1) > limit and len(s2) == limit:
            return 1
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` in the first ``length`` characters of
    ``big``, or None. An empty ``little`` is found at index 0."""
    _check_count(length, "length")
    if not little:
        return 0
    position = big.find(little, 0, length)
    return None if position < 0 else position


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``;
    empty when ``start`` is past the end."""
    _check_count(start, "start")
    _check_count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character.

    A missing string gives an empty result.
    """
    if s is None:
        return ""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence], func: Callable[[int, object], object]
) -> None:
    """Replace each item of the mutable sequence ``s`` in place with
    ``func(index, item)``. A missing sequence is left alone."""
    if s is None:
        return
    for index, item in enumerate(list(s)):
        s[index] = func(index, item)