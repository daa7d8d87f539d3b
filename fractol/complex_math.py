"""Scaling and complex-number helpers used by the fractal iterations."""

from __future__ import annotations


def map_range(value: float, new_min: float, new_max: float, old_max: float) -> float:
    """Linearly map ``value`` from ``[0, old_max]`` onto ``[new_min, new_max]``."""
    return (new_max - new_min) * (value - 0) / (old_max - 0) + new_min


def complex_square(z: complex) -> complex:
    """Return ``z`` squared."""
    x, y = z.real, z.imag
    return complex(x * x - y * y, 2 * x * y)


def complex_square_abs(z: complex) -> complex:
    """Square ``z`` after taking the absolute value of both parts, as the
    burning-ship iteration does."""
    return complex_square(complex(abs(z.real), abs(z.imag)))