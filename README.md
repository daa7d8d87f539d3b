# fractol

The state-keeping core of a fractal explorer for the Mandelbrot set, Julia
sets and the Burning Ship fractal. It also holds some small text, number
and byte-buffer utilities that the explorer uses.

## Modules

- `fractol.view`: the explorer's state. `View(kind, width, height, ...)`
  holds the zoom, the pan offsets (`shift_x`, `shift_y`), the iteration
  depth (`iterations`, 42 by default), the colour scheme (`color_shift`,
  cycling through 0, 1 and 2), the escape value and, for Julia sets, the
  constant (`julia_x`, `julia_y`). Its handlers return True when the
  picture should be drawn again:
  - `View.handle_key(key)`: the arrow keys pan by half the current zoom,
    plus and minus change the iteration depth by 10, space moves to the
    next colour scheme, and Escape sets `closed` and returns False.
  - `View.handle_mouse(button, x, y)`: the wheel zooms in (by 0.95) or out
    (by 1.05) and keeps the point under the pointer fixed. Other buttons
    are ignored.
  - `View.track_julia(x, y)`: on a Julia view, sets the constant to the
    point under the pointer.

  `FractalKind`, `Key` (X11 keysyms) and `MouseButton` name the fractals
  and the inputs.
- `fractol.cli`: argument checking. `parse_arguments(argv)` takes the
  arguments after the program name and accepts `mandelbrot`,
  `burningship`, or `julia <real> <imaginary>`, returning a `FractalArgs`.
  Anything else raises `UsageError`. `check_number` accepts only digits
  and dots and returns the value.
- `fractol.complex_math`: `map_range` rescales a value from `[0, old_max]`
  to `[new_min, new_max]`, `complex_square` squares a complex number, and
  `complex_square_abs` squares it after taking the absolute value of both
  parts, which is the Burning Ship step.
- `fractol.numbers`: `atoi`, `atol` and `atodbl` parse numbers from text.
  `itoa` formats a 32-bit integer and raises `OverflowError` outside that
  range. `maximum` returns the larger of two values.
- `fractol.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.
  The search functions return an index or None.
- `fractol.memory`: helpers for `bytearray` buffers, namely `memset`,
  `bzero`, `memcpy`, `memmove` (offsets within one buffer), `memchr`,
  `memcmp`, `calloc`, `strlcpy` and `strlcat`.
- `fractol.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower` for ASCII codes or one-character
  strings.
- `fractol.linked_list`: a `LinkedList` of `Node`s. It provides
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each`,
  `map`, `len()` and iteration. `pop_front`, `clear` and `map` take an
  optional deletion callback.
- `fractol.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write
  to a stream, stdout by default.
- `fractol.printf`: `printf(fmt, *args, stream=None)` supports
  `%c %s %p %d %i %u %x %X %%` and returns the number of characters
  written. `format_string` returns the text instead of writing it, and
  `to_hex` formats a non-negative integer in hexadecimal.

## Example

```python
from fractol.cli import UsageError, parse_arguments
from fractol.complex_math import complex_square, map_range
from fractol.printf import format_string
from fractol.view import Key, MouseButton, View

args = parse_arguments(["julia", "0.285", "0.01"])
view = View(args.kind, 800, 800, julia_x=args.julia_x, julia_y=args.julia_y)
view.handle_key(Key.PLUS)                   # iterations: 52
view.handle_mouse(MouseButton.WHEEL_UP, 400, 400)

# Pixel 400 of an 800-pixel-wide window maps to the centre of [-2, 2].
assert map_range(400, -2, 2, 800) == 0.0
assert complex_square(1 + 1j) == 2j

try:
    parse_arguments(["sierpinski"])
except UsageError as exc:
    print(exc)

print(format_string("%d iterations, colour %x", 42, 255))
# 42 iterations, colour ff
```

## What it does not do

This package keeps track of where the explorer is looking and how it
should react to input. It does not open a window. It does not compute or
colour the fractal pixels and does not draw anything. It also provides no
command to run: `fractol.cli` only checks arguments.

## Requirements

Python 3.10 or later. No third-party packages are needed at run time. The
tests use pytest (`pip install .[test]`).