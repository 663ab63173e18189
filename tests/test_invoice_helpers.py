"""Unit tests for input parsing and display formatting helpers."""

from datetime import date

import pytest

from invoice_editor.models.currency import CURRENCIES, find_currency
from invoice_editor.utils import (
    format_currency,
    format_date,
    format_quantity,
    parse_date,
    parse_number,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("3.5", 3.5),
        ("  42", 42.0),
        (".5", 0.5),
        ("-2", -2.0),
        ("1e2", 100.0),
        ("12abc", 12.0),
        ("abc", 0.0),
        ("", 0.0),
        ("nan", 0.0),
        (None, 0.0),
        (7, 7.0),
        (2.25, 2.25),
        (float("nan"), 0.0),
    ],
)
def test_parse_number_coerces_silently(raw, expected):
    assert parse_number(raw) == expected


def test_parse_date_formats():
    assert parse_date("2024-12-25") == date(2024, 12, 25)
    assert parse_date("12/25/2024") == date(2024, 12, 25)
    assert parse_date(" 2024-01-05 ") == date(2024, 1, 5)


@pytest.mark.parametrize("raw", ["", "   ", None, "not a date", "2024-13-40"])
def test_parse_date_invalid_returns_none(raw):
    assert parse_date(raw) is None


def test_format_date():
    assert format_date(date(2024, 1, 5)) == "Jan 05, 2024"
    assert format_date(None) == "N/A"


def test_format_currency_two_decimals():
    assert format_currency(0, "$") == "$0.00"
    assert format_currency(105, "$") == "$105.00"
    assert format_currency(1234.5, "Rs.") == "Rs.1234.50"


def test_format_currency_rounding_is_consistent():
    first = format_currency(19.005, "$")

    assert first in {"$19.00", "$19.01"}
    assert format_currency(19.005, "$") == first


def test_format_quantity():
    assert format_quantity(2.0) == "2"
    assert format_quantity(2.5) == "2.5"
    assert format_quantity(0) == "0"


def test_currency_catalog():
    assert [currency.code for currency in CURRENCIES] == [
        "USD",
        "EUR",
        "GBP",
        "JPY",
        "CAD",
        "LKR",
    ]
    assert all(currency.rate == 1 for currency in CURRENCIES)
    assert find_currency("CAD").symbol == "C$"
    assert find_currency("XYZ") is None
    assert find_currency(None) is None
    assert find_currency("LKR").label == "LKR (Rs.)"
