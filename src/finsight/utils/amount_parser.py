"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

# Largest magnitude accepted for any amount or rate
MAX_AMOUNT = Decimal("1000000000000")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed, is not a finite number or
            exceeds MAX_AMOUNT in magnitude
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e

    # NaN and Infinity parse as Decimals but are not amounts
    if not amount.is_finite():
        raise ValueError(f"Amount '{amount_str}' is not a finite number")

    if abs(amount) > MAX_AMOUNT:
        raise ValueError(f"Amount '{amount_str}' exceeds {MAX_AMOUNT:,}")

    return -amount if is_negative else amount


def parse_positive_amount(amount_str: str) -> Decimal:
    """Parse an amount that must be strictly greater than zero.

    Raises:
        ValueError: If the amount cannot be parsed or is zero or negative
    """
    amount = parse_amount(amount_str)
    if amount <= 0:
        raise ValueError(f"Amount '{amount_str.strip()}' must be greater than zero")
    return amount


def format_money(amount: Decimal) -> str:
    """Format an amount for display, e.g. ``$1,234.50``."""
    return f"${amount:,.2f}"
