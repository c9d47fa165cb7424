from __future__ import annotations

import pytest

from sheet_listing.services.formatters import (
    format_currency,
    format_decimal2,
    format_millions,
    is_blank,
    to_number,
)

NBSP = "\u00a0"


def test_empty_input_formats_to_empty_string():
    assert format_currency("") == ""
    assert format_currency(None) == ""
    assert format_decimal2(None) == ""
    assert format_decimal2("") == ""


def test_format_decimal2_comma_decimal():
    assert format_decimal2("1234,5") == "1234,50"


def test_format_decimal2_rounds_half_up_and_groups_negative():
    assert format_decimal2("-1234567,891") == f"-1{NBSP}234{NBSP}567,89"
    assert format_decimal2(0.005) == "0,01"


def test_format_decimal2_small_values_not_grouped():
    assert format_decimal2("54,2") == "54,20"
    assert format_decimal2("999") == "999,00"
    assert format_decimal2("9999") == "9999,00"
    assert format_currency("1234") == "1234 Ft"


def test_grouping_starts_at_five_integer_digits():
    assert format_decimal2("12345") == f"12{NBSP}345,00"
    assert format_currency("-12345,5") == f"-12{NBSP}345,5 Ft"


def test_non_numeric_returned_unchanged():
    assert format_decimal2("n/a") == "n/a"
    assert format_currency("kérésre") == "kérésre"


def test_whitespace_only_counts_as_zero():
    assert format_decimal2("   ") == "0,00"


def test_format_currency_groups_and_suffix():
    assert format_currency("45000000") == f"45{NBSP}000{NBSP}000 Ft"
    assert format_currency("45 000 000") == f"45{NBSP}000{NBSP}000 Ft"


def test_format_currency_keeps_up_to_three_fraction_digits():
    assert format_currency("12,50") == "12,5 Ft"
    assert format_currency("1 234,5678") == "1234,568 Ft"


def test_format_millions():
    assert format_millions("45000000") == "45.00"
    assert format_millions("52 500 000") == "52.50"
    assert format_millions("1234567") == "1.23"
    assert format_millions("nincs") == "0.00"


@pytest.mark.parametrize(
    "value,expected",
    [("45625000", "45.63"), ("1125000", "1.13"), ("-1125000", "-1.13")],
)
def test_format_millions_rounds_ties_away_from_zero(value, expected):
    assert format_millions(value) == expected


def test_format_millions_huge_value_keeps_two_fraction_digits():
    assert format_millions("1e300").endswith(".00")


@pytest.mark.parametrize(
    "value,expected",
    [
        (" 3,5 ", 3.5),
        ("1e6", 1_000_000.0),
        (42, 42.0),
        ("", 0.0),
        ("1_000", None),
        ("inf", None),
        ("nan", None),
        ("1,234.5", None),
        (True, None),
    ],
)
def test_to_number(value, expected):
    assert to_number(value) == expected


def test_is_blank():
    assert is_blank(None)
    assert is_blank("  ")
    assert not is_blank("0")
