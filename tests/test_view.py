import pytest

from fractol.view import FractalKind, Key, MouseButton, View

WIDTH = 800
HEIGHT = 600


def make(kind=FractalKind.MANDELBROT):
    return View(kind, WIDTH, HEIGHT)


def test_initial_state():
    view = make()
    assert view.iterations == 42
    assert view.escape_value == 4
    assert view.zoom == 1.0
    assert (view.shift_x, view.shift_y) == (0.0, 0.0)
    assert view.color_shift == 0
    assert view.closed is False


def test_kind_from_string():
    view = View("burningship", WIDTH, HEIGHT)
    assert view.kind is FractalKind.BURNING_SHIP


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        View("sierpinski", WIDTH, HEIGHT)


@pytest.mark.parametrize("size", [(0, HEIGHT), (WIDTH, -1)])
def test_bad_size_rejected(size):
    with pytest.raises(ValueError):
        View(FractalKind.JULIA, *size)


def test_escape_closes_without_redraw():
    view = make()
    assert view.handle_key(Key.ESCAPE) is False
    assert view.closed is True


def test_left_right_cancel():
    view = make()
    assert view.handle_key(Key.LEFT) is True
    assert view.shift_x < 0
    view.handle_key(Key.RIGHT)
    assert view.shift_x == pytest.approx(0.0)


def test_up_down_cancel():
    view = make()
    view.handle_key(Key.UP)
    assert view.shift_y > 0
    view.handle_key(Key.DOWN)
    assert view.shift_y == pytest.approx(0.0)


def test_pan_scales_with_zoom():
    near = make()
    far = make()
    far.zoom = near.zoom * 2
    near.handle_key(Key.RIGHT)
    far.handle_key(Key.RIGHT)
    assert far.shift_x == pytest.approx(2 * near.shift_x)


def test_plus_and_minus_change_iterations():
    view = make()
    before = view.iterations
    view.handle_key(Key.PLUS)
    assert view.iterations == before + 10
    view.handle_key(Key.MINUS)
    view.handle_key(Key.MINUS)
    assert view.iterations == before - 10


def test_space_cycles_three_colour_schemes():
    view = make()
    seen = []
    for _ in range(3):
        view.handle_key(Key.SPACE)
        seen.append(view.color_shift)
    assert seen == [1, 2, 0]


def test_raw_keysym_accepted():
    view = make()
    view.handle_key(int(Key.SPACE))
    assert view.color_shift == 1


def test_unknown_key_redraws_without_change():
    view = make()
    assert view.handle_key(ord("q")) is True
    assert (view.shift_x, view.shift_y, view.iterations, view.color_shift) == (
        0.0,
        0.0,
        42,
        0,
    )


def test_wheel_zoom_factors():
    view = make()
    assert view.handle_mouse(MouseButton.WHEEL_UP, 10, 10) is True
    assert view.zoom == pytest.approx(0.95)
    view = make()
    view.handle_mouse(MouseButton.WHEEL_DOWN, 10, 10)
    assert view.zoom == pytest.approx(1.05)


def test_other_buttons_ignored():
    view = make()
    assert view.handle_mouse(MouseButton.LEFT, 123, 45) is False
    assert view.zoom == 1.0
    assert (view.shift_x, view.shift_y) == (0.0, 0.0)


@pytest.mark.parametrize("button", [MouseButton.WHEEL_UP, MouseButton.WHEEL_DOWN])
def test_zoom_keeps_point_under_pointer(button):
    view = make(FractalKind.JULIA)
    x, y = 612, 97
    view.track_julia(x, y)
    before = (view.julia_x, view.julia_y)
    view.handle_mouse(button, x, y)
    view.track_julia(x, y)
    assert view.julia_x == pytest.approx(before[0])
    assert view.julia_y == pytest.approx(before[1])


def test_zoom_at_centre_keeps_shift():
    view = make(FractalKind.BURNING_SHIP)
    view.handle_mouse(MouseButton.WHEEL_UP, WIDTH / 2, HEIGHT / 2)
    assert view.shift_x == pytest.approx(0.0)
    assert view.shift_y == pytest.approx(0.0)


def test_burning_ship_vertical_axis_is_flipped():
    ship = make(FractalKind.BURNING_SHIP)
    mandel = make(FractalKind.MANDELBROT)
    ship.handle_mouse(MouseButton.WHEEL_UP, 100, 50)
    mandel.handle_mouse(MouseButton.WHEEL_UP, 100, 50)
    assert ship.shift_x == pytest.approx(mandel.shift_x)
    assert ship.shift_y == pytest.approx(-mandel.shift_y)
    assert ship.shift_y != 0


def test_track_julia_only_for_julia():
    view = make(FractalKind.MANDELBROT)
    assert view.track_julia(0, 0) is False
    assert (view.julia_x, view.julia_y) == (0.0, 0.0)


def test_track_julia_corners_and_centre():
    view = make(FractalKind.JULIA)
    assert view.track_julia(0, 0) is True
    assert (view.julia_x, view.julia_y) == pytest.approx((-2.0, 2.0))
    view.track_julia(WIDTH / 2, HEIGHT / 2)
    assert (view.julia_x, view.julia_y) == pytest.approx((0.0, 0.0))