"""Navigation state of a fractal view and its response to input events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from fractol.complex_math import map_range


class FractalKind(str, enum.Enum):
    """The fractals that can be displayed."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    BURNING_SHIP = "burningship"


class Key(enum.IntEnum):
    """X11 keysyms the view reacts to."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    PLUS = 0x2B
    MINUS = 0x2D
    SPACE = 0x20


class MouseButton(enum.IntEnum):
    """Mouse buttons; the wheel reports as buttons 4 and 5."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


_PAN_FACTOR = 0.5
_ITERATION_STEP = 10
_COLOR_SCHEMES = 3
_ZOOM_IN = 0.95
_ZOOM_OUT = 1.05


@dataclass
class View:
    """Where the complex plane is looked at and how it is drawn.

    The handlers return True when the picture has to be drawn again.
    """

    kind: FractalKind
    width: int
    height: int
    julia_x: float = 0.0
    julia_y: float = 0.0
    escape_value: float = 4
    iterations: int = 42
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    color_shift: int = 0
    closed: bool = False

    def __post_init__(self) -> None:
        self.kind = FractalKind(self.kind)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"window size must be positive, got {self.width}x{self.height}"
            )

    def _real_at(self, x: float) -> float:
        return map_range(x, -2, 2, self.width) * self.zoom

    def _imag_at(self, y: float) -> float:
        if self.kind is FractalKind.BURNING_SHIP:
            return map_range(y, -2, 2, self.height) * self.zoom
        return map_range(y, 2, -2, self.height) * self.zoom

    def handle_key(self, key: Union[Key, int]) -> bool:
        """React to a key press.

        Escape marks the view closed and needs no redraw; every other key,
        known or not, asks for one.
        """
        try:
            known: Optional[Key] = Key(key)
        except ValueError:
            known = None
        if known is Key.ESCAPE:
            self.closed = True
            return False
        step = _PAN_FACTOR * self.zoom
        if known is Key.LEFT:
            self.shift_x -= step
        elif known is Key.RIGHT:
            self.shift_x += step
        elif known is Key.UP:
            self.shift_y += step
        elif known is Key.DOWN:
            self.shift_y -= step
        elif known is Key.PLUS:
            self.iterations += _ITERATION_STEP
        elif known is Key.MINUS:
            self.iterations -= _ITERATION_STEP
        elif known is Key.SPACE:
            self.color_shift = (self.color_shift + 1) % _COLOR_SCHEMES
        return True

    def handle_mouse(self, button: Union[MouseButton, int], x: float, y: float) -> bool:
        """Zoom with the wheel, keeping the point under the pointer fixed.

        Other buttons are ignored.
        """
        mouse_re = self._real_at(x) + self.shift_x
        mouse_im = self._imag_at(y) + self.shift_y
        if button == MouseButton.WHEEL_UP:
            self.zoom *= _ZOOM_IN
        elif button == MouseButton.WHEEL_DOWN:
            self.zoom *= _ZOOM_OUT
        else:
            return False
        self.shift_x = mouse_re - self._real_at(x)
        self.shift_y = mouse_im - self._imag_at(y)
        return True

    def track_julia(self, x: float, y: float) -> bool:
        """Move the Julia constant to the point under the pointer.

        Only a Julia view reacts; the result says whether it did.
        """
        if self.kind is not FractalKind.JULIA:
            return False
        self.julia_x = map_range(x, -2, 2, self.width) * self.zoom + self.shift_x
        self.julia_y = map_range(y, 2, -2, self.height) * self.zoom + self.shift_y
        return True