import io

import pytest

from so_long.formatting import FormatError, format_message, print_message


def test_plain_text_unchanged():
    assert format_message("hello world") == "hello world"


def test_percent_literal():
    assert format_message("%%") == "%"


def test_char_conversion():
    assert format_message("%c", "A") == "A"
    assert format_message("%c", 66) == chr(66)


def test_string_conversion():
    assert format_message("[%s]", "queso") == "[" + "queso" + "]"


def test_null_string():
    assert format_message("%s", None) == "(null)"


@pytest.mark.parametrize("value", [None, 0])
def test_nil_pointer(value):
    assert format_message("%p", value) == "(nil)"


def test_pointer_hex():
    text = format_message("%p", 255)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 255


@pytest.mark.parametrize("spec", ["d", "i"])
@pytest.mark.parametrize("n", [0, 7, -4, 2147483647, -2147483648])
def test_signed_round_trip(spec, n):
    assert int(format_message("%" + spec, n)) == n


def test_signed_min_int_text():
    assert format_message("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert int(format_message("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("n", [0, 9, 10, 4294967295])
def test_unsigned_round_trip(n):
    assert int(format_message("%u", n)) == n


def test_unsigned_and_hex_agree_on_negative():
    assert int(format_message("%u", -1)) == int(format_message("%x", -1), 16)


@pytest.mark.parametrize("n", [0, 15, 16, 3054, 4294967295])
def test_hex_round_trip(n):
    assert int(format_message("%x", n), 16) == n


def test_hex_upper_matches_lower():
    lower = format_message("%x", 48879)
    upper = format_message("%X", 48879)
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_unknown_conversion_writes_nothing():
    assert format_message("a%qb") == "ab"


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_message("abc%")


def test_missing_format_raises():
    with pytest.raises(FormatError):
        format_message(None)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_message("%d %d", 1)


def test_print_message_writes_and_counts():
    buf = io.StringIO()
    count = print_message("%s=%d\n", "moves", 3, stream=buf)
    assert buf.getvalue() == format_message("%s=%d\n", "moves", 3)
    assert count == len(buf.getvalue())


def test_print_message_error_writes_nothing():
    buf = io.StringIO()
    with pytest.raises(FormatError):
        print_message("oops %", stream=buf)
    assert buf.getvalue() == ""