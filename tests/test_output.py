import io

import pytest

from fractol.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_code():
    out = io.StringIO()
    put_char(ord("Q"), out)
    assert out.getvalue() == "Q"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hola loreto", out)
    put_str("", out)
    assert out.getvalue() == "hola loreto"


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("hola", out)
    assert out.getvalue() == "hola\n"


def test_put_endl_empty():
    out = io.StringIO()
    put_endl("", out)
    assert out.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, 10, -9, -10, 189, -9874, 2147483647])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2147483648, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_char("d")
    assert capsys.readouterr().out == "abcd"