import io

import pytest

from ftkit.printf import format_string, printf


def test_plain_text_unchanged():
    assert format_string("no conversions here") == "no conversions here"


def test_percent_literal():
    assert format_string("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_decimal_wraps_to_32_bits():
    assert int(format_string("%d", 2147483648)) == -2147483648


def test_unsigned_of_negative_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_pointer_zero():
    assert format_string("%p", 0) == "0x0"


def test_pointer_round_trip():
    text = format_string("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format_string("%c%c", "a", ord("b")) == "ab"


def test_mixed_conversions():
    assert format_string("%s=%d (%c)", "x", 5, "y") == "x=5 (y)"


def test_unknown_conversion_produces_nothing_and_keeps_argument():
    assert format_string("a%qb%d", 3) == "ab3"


def test_trailing_percent_dropped():
    assert format_string("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "12")


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s-%x", "id", 255, stream=out)
    assert count == len(out.getvalue())
    assert out.getvalue() == format_string("%s-%x", "id", 255)


def test_printf_defaults_to_stdout(capsys):
    count = printf("%d%%", 50)
    captured = capsys.readouterr().out
    assert captured == "50%"
    assert count == len(captured)