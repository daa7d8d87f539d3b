"""Command-line argument handling for choosing a fractal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fractol.chars import is_digit
from fractol.numbers import atodbl
from fractol.view import FractalKind

USAGE = (
    "usage: fractol mandelbrot\n"
    "       fractol julia <real> <imaginary>\n"
    "       fractol burningship\n"
)


class UsageError(ValueError):
    """The command line does not name a fractal correctly."""


@dataclass(frozen=True)
class FractalArgs:
    """What the command line asked for."""

    kind: FractalKind
    julia_x: float = 0.0
    julia_y: float = 0.0


def check_number(text: str) -> float:
    """Accept text made only of digits and dots and return its value."""
    if any(not (is_digit(ch) or ch == ".") for ch in text):
        raise UsageError(f"not a valid number: {text!r}\n{USAGE}")
    return atodbl(text)


def parse_arguments(argv: Sequence[str]) -> FractalArgs:
    """Interpret the arguments that follow the program name."""
    args = list(argv)
    if len(args) == 1 and args[0] == FractalKind.MANDELBROT.value:
        return FractalArgs(FractalKind.MANDELBROT)
    if len(args) == 1 and args[0] == FractalKind.BURNING_SHIP.value:
        return FractalArgs(FractalKind.BURNING_SHIP)
    if len(args) == 3 and args[0] == FractalKind.JULIA.value:
        real = check_number(args[1])
        imaginary = check_number(args[2])
        return FractalArgs(FractalKind.JULIA, real, imaginary)
    raise UsageError(USAGE)