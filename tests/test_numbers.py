import pytest

from hoptrace.toolkit.numbers import atoi, atoi_base, itoa


@pytest.mark.parametrize("n", [0, 7, -7, 42, -2147483648, 2147483647, 10**12])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa(3.0)
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r-42") == -42
    assert atoi("   +17") == 17


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == 123
    assert atoi("-99 bottles") == -99


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == atoi("")
    assert atoi("-") == atoi("")
    assert atoi("+-5") == atoi("")


def test_atoi_handles_large_values():
    assert atoi("-2247483649") == -2247483649


@pytest.mark.parametrize(
    "text,base",
    [("101", 2), ("777", 8), ("ff", 16), ("FF", 16), ("-1a", 16), ("12345", 10), ("zz0", 36 - 20)],
)
def test_atoi_base_matches_int(text, base):
    digits = text.lstrip("-")
    valid = "".join(
        c for c in digits if c.lower() in "0123456789abcdef"[:base]
    )
    if valid == digits:
        assert atoi_base(text, base) == int(text, base)
    else:
        assert atoi_base(text, base) == atoi_base(text[: len(text) - len(digits)] + digits[: next(
            i for i, c in enumerate(digits) if c.lower() not in "0123456789abcdef"[:base]
        )], base)


def test_atoi_base_stops_at_out_of_range_digit():
    assert atoi_base("1012", 2) == int("101", 2)
    assert atoi_base("7g", 16) == int("7", 16)


def test_atoi_base_round_trip_hex():
    for n in (0, 1, 255, 4096, 65535):
        assert atoi_base(format(n, "x"), 16) == n
        assert atoi_base(format(n, "b"), 2) == n


def test_atoi_base_without_digits_is_zero():
    assert atoi_base("xyz", 16) == 0


@pytest.mark.parametrize("base", [0, 1, 17, -2])
def test_atoi_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        atoi_base("10", base)