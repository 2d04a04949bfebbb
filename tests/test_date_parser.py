"""Tests for date parsing and formatting."""

from datetime import date, datetime

import pytest

from finsight.utils.date_parser import (
    format_display_date,
    format_loan_date,
    next_deposit_date,
    parse_day_number,
    parse_loan_date,
)


def test_parse_loan_date():
    """Test parsing the dd-MM-yyyy HH:mm format."""
    assert parse_loan_date("10-10-2030 19:00") == datetime(2030, 10, 10, 19, 0)


def test_parse_loan_date_strips_whitespace():
    assert parse_loan_date("  01-02-2030 09:05 ") == datetime(2030, 2, 1, 9, 5)


@pytest.mark.parametrize(
    "value",
    ["2030-10-10 19:00", "1-1-2030 9:00", "10-10-2030", "31-02-2030 10:00", "10-10-2030 25:00", ""],
)
def test_parse_loan_date_invalid(value):
    """Test that other formats and impossible dates are rejected."""
    with pytest.raises(ValueError):
        parse_loan_date(value)


def test_format_loan_date():
    assert format_loan_date(datetime(2030, 3, 4, 5, 6)) == "04-03-2030 05:06"


def test_format_display_date():
    assert format_display_date(datetime(2126, 10, 10, 19, 0)) == "10 OCT 2126, 19:00"


def test_next_deposit_later_this_month():
    assert next_deposit_date(20, date(2026, 1, 15)) == date(2026, 1, 20)


def test_next_deposit_today():
    """Test a deposit due today is still the next deposit."""
    assert next_deposit_date(15, date(2026, 1, 15)) == date(2026, 1, 15)


def test_next_deposit_next_month():
    assert next_deposit_date(3, date(2026, 1, 15)) == date(2026, 2, 3)


def test_next_deposit_clamps_to_short_month():
    """Test a day past the end of the month falls on its last day."""
    assert next_deposit_date(31, date(2026, 2, 10)) == date(2026, 2, 28)
    assert next_deposit_date(31, date(2028, 2, 10)) == date(2028, 2, 29)
    assert next_deposit_date(31, date(2026, 3, 31)) == date(2026, 3, 31)


def test_next_deposit_rolls_over_year():
    assert next_deposit_date(1, date(2026, 12, 2)) == date(2027, 1, 1)


def test_parse_loan_date_rejects_non_ascii_digits():
    with pytest.raises(ValueError):
        parse_loan_date("١٠-10-2030 19:00")


@pytest.mark.parametrize("value,expected", [("5", 5), (" 31 ", 31), ("007", 7)])
def test_parse_day_number(value, expected):
    assert parse_day_number(value) == expected


@pytest.mark.parametrize("value", ["", "+5", "-5", "1_5", "٥", "2.0"])
def test_parse_day_number_invalid(value):
    with pytest.raises(ValueError):
        parse_day_number(value)
