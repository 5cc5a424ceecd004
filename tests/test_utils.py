from datetime import date
from decimal import Decimal
from fractions import Fraction

import pytest

from utils import dollars_to_cents, exact_value, format_cents, parse_date


@pytest.mark.parametrize("value, cents", [
    ("12.34", 1234),
    ("$1,000", 100000),
    (" 0.1 ", 10),
    (0.1 + 0.2, 30),
    (Decimal("2.005"), 201),
    (7, 700),
    ("-3.5", -350),
])
def test_dollars_to_cents(value, cents):
    assert dollars_to_cents(value) == cents


@pytest.mark.parametrize("value", ["", "abc", "nan", "inf"])
def test_dollars_to_cents_rejects_garbage(value):
    with pytest.raises(ValueError):
        dollars_to_cents(value)


@pytest.mark.parametrize("cents, text", [
    (0, "$0.00"),
    (5, "$0.05"),
    (123456, "$1234.56"),
    (-505, "-$5.05"),
])
def test_format_cents(cents, text):
    assert format_cents(cents) == text


def test_parse_date():
    assert parse_date("2024-01-05") == date(2024, 1, 5)
    assert parse_date("2024-01-05T10:20:30.000Z") == date(2024, 1, 5)


@pytest.mark.parametrize("value, expected", [
    (33.33, Fraction(3333, 100)),
    (Decimal("29.99"), Fraction(2999, 100)),
    (2, Fraction(2)),
    ("0.5", Fraction(1, 2)),
])
def test_exact_value(value, expected):
    assert exact_value(value) == expected
