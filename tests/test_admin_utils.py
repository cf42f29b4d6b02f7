from decimal import Decimal

import pytest

from ui.admin_utils import format_currency, is_valid_email, parse_price


@pytest.mark.parametrize("email,valid", [
    ("ana@example.com", True),
    ("a.b+c@food.co", True),
    ("ana@", False),
    ("", False),
    (None, False),
])
def test_is_valid_email(email, valid):
    assert is_valid_email(email) is valid


@pytest.mark.parametrize("raw,expected", [
    ("10", Decimal("10.00")),
    (" 2.5 ", Decimal("2.50")),
    ("0", Decimal("0.00")),
    ("-1", None),
    ("abc", None),
    ("nan", None),
])
def test_parse_price(raw, expected):
    assert parse_price(raw) == expected


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(None) == "$0.00"
