"""Utility functions for finsight."""

from finsight.utils.date_parser import parse_loan_date, format_loan_date, next_deposit_date, parse_day_number
from finsight.utils.amount_parser import parse_amount, parse_positive_amount, format_money

__all__ = [
    "parse_loan_date",
    "format_loan_date",
    "next_deposit_date",
    "parse_day_number",
    "parse_amount",
    "parse_positive_amount",
    "format_money",
]
