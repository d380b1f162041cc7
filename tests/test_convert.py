import pytest

from cubed import convert

HEX = "0123456789abcdef"


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -42", -42), ("+7abc", 7), ("\t\n\v 123", 123), ("abc", 0), ("--5", 0), ("", 0)],
)
def test_atoi(text, expected):
    assert convert.atoi(text) == expected


def test_atoi_wraps_like_32_bit_int():
    assert convert.atoi("2147483648") == convert.INT_MIN
    assert convert.atoi("-2147483648") == convert.INT_MIN
    assert convert.atoi("2147483647") == convert.INT_MAX


@pytest.mark.parametrize("text, expected", [("123", 123), ("  -456xyz", -456), ("+0", 0), ("x1", 0)])
def test_atol(text, expected):
    assert convert.atol(text) == expected


def test_atol_saturates():
    assert convert.atol("99999999999999999999") == convert.LONG_MAX
    assert convert.atol("-99999999999999999999") == convert.LONG_MIN
    assert convert.atol(str(convert.LONG_MAX)) == convert.LONG_MAX


def test_strtol_decimal_with_end():
    assert convert.strtol("  -123abc", 10) == (-123, 6)


def test_strtol_auto_hex():
    assert convert.strtol("0x1A", 0) == (int("1A", 16), 4)


def test_strtol_auto_octal():
    assert convert.strtol("0777", 0) == (int("777", 8), 4)


def test_strtol_auto_decimal():
    assert convert.strtol("950", 0) == (950, 3)


def test_strtol_lone_zero_base_zero():
    assert convert.strtol("0", 0) == (0, 1)


def test_strtol_base_36():
    assert convert.strtol("zz!", 36) == (int("zz", 36), 2)


def test_strtol_explicit_hex_does_not_skip_prefix():
    assert convert.strtol("0x10", 16) == (0, 1)


def test_strtol_stops_on_out_of_base_digit():
    value, end = convert.strtol("1012", 2)
    assert value == int("101", 2)
    assert end == 3


@pytest.mark.parametrize("base", [-1, 1, 37])
def test_strtol_invalid_base(base):
    with pytest.raises(ValueError):
        convert.strtol("12", base)


def test_strtol_saturates():
    assert convert.strtol("99999999999999999999", 10)[0] == convert.LONG_MAX
    assert convert.strtol("-99999999999999999999", 10)[0] == convert.LONG_MIN


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    assert int(convert.itoa(n)) == n


def test_itoa_int_min():
    assert convert.itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 9, 10, 18446744073709551615])
def test_utoa_round_trip(n):
    assert int(convert.utoa(n)) == n


def test_utoa_rejects_negative():
    with pytest.raises(ValueError):
        convert.utoa(-1)


def test_utoa_base_hex():
    assert convert.utoa_base(255, HEX) == "ff"
    assert convert.utoa_base(255, HEX.upper()) == "FF"


@pytest.mark.parametrize("value", [0, 1, 15, 16, 4096, 123456789])
def test_utoa_base_round_trip(value):
    assert int(convert.utoa_base(value, HEX), 16) == value
    assert int(convert.utoa_base(value, "01"), 2) == value


def test_utoa_base_zero():
    assert convert.utoa_base(0, "01") == "0"


def test_utoa_base_errors():
    with pytest.raises(ValueError):
        convert.utoa_base(5, "0")
    with pytest.raises(ValueError):
        convert.utoa_base(-5, HEX)