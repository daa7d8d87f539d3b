"""Fractal explorer view state, complex helpers and small text and number utilities."""

__version__ = "0.1.0"