from decimal import Decimal

import pytest

from cashcards.modules.cards import InvalidAmountError, from_cents, parse_amount, to_cents


@pytest.mark.parametrize(
    "raw, expected",
    [
        (Decimal("250.00"), Decimal("250.00")),
        (Decimal("19.9"), Decimal("19.90")),
        (19.99, Decimal("19.99")),
        (150, Decimal("150.00")),
        ("123.45", Decimal("123.45")),
        (0, Decimal("0.00")),
    ],
)
def test_parse_amount_normalises_to_cents(raw, expected):
    amount = parse_amount(raw)
    assert amount == expected
    assert amount.as_tuple().exponent == -2


@pytest.mark.parametrize(
    "raw",
    [None, True, "abc", [], Decimal("NaN"), Decimal("Infinity"), Decimal("-0.01"), Decimal("1.005"), Decimal("1e20")],
)
def test_parse_amount_rejects_invalid_values(raw):
    with pytest.raises(InvalidAmountError):
        parse_amount(raw)


def test_cents_conversion_is_exact():
    assert to_cents(Decimal("123.45")) == 12345
    assert to_cents(Decimal("1.00")) == 100
    assert from_cents(12345) == Decimal("123.45")
    assert str(from_cents(100)) == "1.00"
    assert from_cents(to_cents(Decimal("0.10"))) + from_cents(to_cents(Decimal("0.20"))) == Decimal("0.30")
