"""Date parsing utilities."""

import re
from datetime import date, datetime
from dateutil.relativedelta import relativedelta

# Stored and typed form, e.g. "10-10-2030 19:00"
LOAN_DATE_FORMAT = "%d-%m-%Y %H:%M"
# Display form, e.g. "10 OCT 2030, 19:00"
DISPLAY_DATE_FORMAT = "%d %b %Y, %H:%M"

_LOAN_DATE_PATTERN = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4} [0-9]{2}:[0-9]{2}")
_DAY_PATTERN = re.compile(r"[0-9]+")


def parse_loan_date(date_str: str) -> datetime:
    """Parse a loan return date in the fixed ``dd-MM-yyyy HH:mm`` format.

    Unlike ``strptime`` on its own, every component must be zero-padded to
    its full width, so "1-1-2030 9:00" is rejected.

    Args:
        date_str: Date string

    Returns:
        Naive datetime with minute precision

    Raises:
        ValueError: If date string does not match the format or is not a real date
    """
    date_str = date_str.strip()
    if not _LOAN_DATE_PATTERN.fullmatch(date_str):
        raise ValueError(f"Date '{date_str}' is not in dd-MM-yyyy HH:mm format")
    try:
        return datetime.strptime(date_str, LOAN_DATE_FORMAT)
    except ValueError as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def format_loan_date(value: datetime) -> str:
    """Format a datetime in the stored ``dd-MM-yyyy HH:mm`` form."""
    return value.strftime(LOAN_DATE_FORMAT)


def format_display_date(value: datetime) -> str:
    """Format a datetime for display, e.g. ``10 OCT 2030, 19:00``."""
    return value.strftime(DISPLAY_DATE_FORMAT).upper()


def next_deposit_date(deposit_day: int, today: date | None = None) -> date:
    """Return the next date on which a monthly deposit falls due.

    Months shorter than ``deposit_day`` clamp to their last day, so a deposit
    on the 31st falls on 30 April and 28 or 29 February.

    Args:
        deposit_day: Day of month between 1 and 31
        today: Reference date (defaults to today)

    Returns:
        The deposit date this month if it has not passed yet, else next month's
    """
    today = today or date.today()
    this_month = today + relativedelta(day=deposit_day)
    if this_month >= today:
        return this_month
    return today + relativedelta(months=1, day=deposit_day)


def parse_day_number(day_str: str) -> int:
    """Parse a day of month written with ASCII digits only.

    Raises:
        ValueError: If the text is not a plain unsigned number (no sign,
            underscores or non-ASCII digits)
    """
    day_str = day_str.strip()
    if not _DAY_PATTERN.fullmatch(day_str):
        raise ValueError(f"Day '{day_str}' is not a whole number")
    return int(day_str)
