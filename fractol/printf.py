"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from fractol.numbers import itoa

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _as_int32(n: int) -> int:
    return ((int(n) + 2**31) % 2**32) - 2**31


def _as_uint32(n: int) -> int:
    return int(n) % 2**32


def to_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError(f"cannot format a negative number as hex: {n}")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        n, rest = divmod(n, 16)
        out.append(digits[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        if not value:
            return "(nil)"
        return "0x" + to_hex(int(value) % 2**64)
    if spec in "di":
        return itoa(_as_int32(value))
    if spec == "u":
        return str(_as_uint32(value))
    return to_hex(_as_uint32(value), upper=spec == "X")


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end produces nothing.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded ``fmt`` to ``stream`` (stdout by default) and
    return the number of characters written."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)