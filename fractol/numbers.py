"""Parsing numbers from text and formatting integers."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_ATOI_SPACE = " \t\n\v\f\r"
_ATOL_SPACE = " \a\b\t\n\v\f\r"
_ATODBL_SPACE = " \t\n\v\f\r"


def _skip(text: str, characters: str) -> str:
    return text.lstrip(characters)


def _leading_digits(text: str) -> str:
    end = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        end += 1
    return text[:end]


def _signed_digits(text: str, spaces: str) -> int:
    text = _skip(text, spaces)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = _leading_digits(text)
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a decimal integer after optional white space and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    return _signed_digits(text, _ATOI_SPACE)


def atol(text: str) -> int:
    """Parse a decimal integer like :func:`atoi`.

    Bell and backspace also count as leading white space.
    """
    return _signed_digits(text, _ATOL_SPACE)


def atodbl(text: str) -> float:
    """Parse a decimal number with an optional fractional part.

    Any run of ``+`` and ``-`` signs is accepted, each ``-`` flipping the
    sign. Every character before the first ``.`` is read as a digit of the
    integer part and every character after it as a digit of the fraction,
    without checking that they are digits.
    """
    text = _skip(text, _ATODBL_SPACE)
    sign = 1
    while text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -sign
        text = text[1:]
    integer_text, dot, fraction_text = text.partition(".")
    integer_part = 0
    for ch in integer_text:
        integer_part = integer_part * 10 + (ord(ch) - 48)
    fractional_part = 0.0
    power = 1.0
    for ch in fraction_text if dot else "":
        power /= 10
        fractional_part = fractional_part + (ord(ch) - 48) * power
    return (integer_part + fractional_part) * sign


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit integer range")
    return str(int(n))


def maximum(a, b):
    """Return the larger of two values; ``b`` when they are equal."""
    return a if a > b else b