from decimal import Decimal

import pytest

from bank.core.money import add, format_amount, negate, parse_amount, subtract


@pytest.mark.parametrize(
    "text, expected",
    [
        ("100", Decimal("100")),
        ("0.5", Decimal("0.5")),
        (".25", Decimal("0.25")),
        ("1e3", Decimal("1000")),
        ("-50", Decimal("-50")),
        (" 12.00 ", Decimal("12.00")),
    ],
)
def test_parse_amount_accepts_decimal_literals(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "   ", "abc", "1.2.3", "NaN", "Infinity", "-inf", "1_000", "0x10", "1e", None, 100],
)
def test_parse_amount_rejects_non_literals(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_amount_rejects_out_of_range_exponents():
    with pytest.raises(ValueError):
        parse_amount("1e200000")
    with pytest.raises(ValueError):
        parse_amount("1e-20000")


def test_format_amount_is_positional():
    assert format_amount(Decimal("1E+3")) == "1000"
    assert format_amount(Decimal("0.10")) == "0.10"
    assert format_amount(Decimal("-100")) == "-100"
    assert format_amount(Decimal("-0")) == "0"
    assert format_amount(Decimal("-0.00")) == "0.00"


def test_arithmetic_is_exact_beyond_default_precision():
    big = Decimal("12345678901234567890123456789.123456789")
    tiny = Decimal("0.000000001")

    assert add(big, tiny) == Decimal("12345678901234567890123456789.123456790")
    assert subtract(big, big) == 0
    assert format_amount(subtract(Decimal("1000"), Decimal("100"))) == "900"
    assert format_amount(negate(Decimal("100"))) == "-100"
