import io

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    out = io.StringIO()
    put_char("a", out)
    assert out.getvalue() == "a"


def test_put_char_int_code():
    out = io.StringIO()
    put_char(ord("Z"), out)
    assert out.getvalue() == "Z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello", out)
    put_str(" world", out)
    assert out.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -1, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_negative_has_sign():
    out = io.StringIO()
    put_nbr(-15, out)
    assert out.getvalue() == "-15"


def test_put_nbr_defaults_to_stdout(capsys):
    put_nbr(123)
    assert capsys.readouterr().out == "123"