import io

import pytest

from minish.printf import put_line, printf, sprintf, to_base

HEX = "0123456789abcdef"


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 4096, 2**32 - 1, 2**64 - 1])
def test_to_base_hex_matches_format(number):
    assert to_base(number, HEX) == format(number, "x")


@pytest.mark.parametrize("number", [0, 1, 2, 7, 1023])
def test_to_base_binary_round_trip(number):
    assert int(to_base(number, "01"), 2) == number


def test_to_base_rejects_short_alphabet():
    with pytest.raises(ValueError):
        to_base(5, "0")


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-1, HEX)


@pytest.mark.parametrize("n", [0, 42, -42, 2**31 - 1, -(2**31)])
def test_decimal_conversions(n):
    assert sprintf("%d", n) == str(n)
    assert sprintf("%i", n) == str(n)


def test_decimal_wraps_to_32_bits():
    assert sprintf("%d", 2**31) == str(-(2**31))


def test_unsigned_of_negative_wraps():
    assert sprintf("%u", -1) == str(2**32 - 1)


def test_hex_of_negative_wraps():
    assert sprintf("%x", -1) == format(2**32 - 1, "x")
    assert sprintf("%X", -1) == format(2**32 - 1, "X")


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_has_prefix_and_hex():
    address = 0xDEADBEEF
    assert sprintf("%p", address) == "0x" + format(address, "x")


def test_char_from_string_and_code():
    assert sprintf("%c%c", "z", 65) == "z" + chr(65)


def test_percent_literal_consumes_no_argument():
    assert sprintf("%%%s", "word") == "%word"


def test_unknown_conversion_is_dropped():
    assert sprintf("a%qb%s", "c") == "abc"


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_mixed_format():
    assert sprintf("%s=%d (%x)", "size", 255, 255) == "size=255 (" + format(255, "x") + ")"


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s:%u\n", "n", 7, stream=out)
    assert out.getvalue() == "n:7\n"
    assert count == len(out.getvalue())


def test_put_line_appends_newline():
    out = io.StringIO()
    put_line("hello", stream=out)
    put_line(None, stream=out)
    assert out.getvalue() == "hello\n\n"