"""Free-text command parser.

Turns one raw input line into a ``Command``: an action, the entity kind it
applies to, the labeled fields in their required order and, for index-based
commands, a 0-based index checked against the current collection size.

Labeled fields are introduced by two-character markers such as ``d/`` and
``a/``. Each marker must appear, in the required order, with non-empty text
up to the next marker.
"""

import re
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from finsight.domain.errors import (
    AddExpenseFormatError,
    AddIncomeFormatError,
    AddInvestmentMissingFieldError,
    AddInvestmentOrderError,
    AddLoanFormatError,
    DeleteExpenseIndexError,
    DeleteIncomeIndexError,
    DeleteInvestmentIndexError,
    DeleteInvestmentMissingIndexError,
    DeleteInvestmentNumberFormatError,
    DeleteLoanIndexError,
    DomainError,
    EditIncomeFormatError,
    EditIncomeIndexError,
    EditLoanFormatError,
    EditLoanIndexError,
    LoanNotRepaidIndexError,
    LoanRepaidIndexError,
)

LOAN = "loan"
INCOME = "income"
EXPENSE = "expense"
INVESTMENT = "investment"

DESCRIPTION = "d/"
AMOUNT = "a/"
RATE = "r/"
MONTH_DAY = "m/"

LOAN_MARKERS = (DESCRIPTION, AMOUNT, RATE)
INCOME_MARKERS = (DESCRIPTION, AMOUNT)
EXPENSE_MARKERS = (DESCRIPTION, AMOUNT)
INVESTMENT_MARKERS = (DESCRIPTION, AMOUNT, RATE, MONTH_DAY)

_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")

# Matched in order; "list income overview" must precede "list income".
COMMAND_PREFIXES: tuple[tuple[str, str, Optional[str]], ...] = (
    ("list income overview", "overview", INCOME),
    ("list loan", "list", LOAN),
    ("list income", "list", INCOME),
    ("list expense", "list", EXPENSE),
    ("list investment", "list", INVESTMENT),
    ("add loan", "add", LOAN),
    ("add income", "add", INCOME),
    ("add expense", "add", EXPENSE),
    ("add investment", "add", INVESTMENT),
    ("delete loan", "delete", LOAN),
    ("delete income", "delete", INCOME),
    ("delete expense", "delete", EXPENSE),
    ("delete investment", "delete", INVESTMENT),
    ("edit loan", "edit", LOAN),
    ("edit income", "edit", INCOME),
    ("loan not repaid", "not_repaid", LOAN),
    ("loan repaid", "repaid", LOAN),
    ("help", "help", None),
    ("bye", "bye", None),
)


@dataclass(frozen=True)
class Command:
    """A parsed command line."""

    action: str
    kind: Optional[str] = None
    fields: tuple[str, ...] = ()
    index: Optional[int] = None


UNKNOWN = Command(action="unknown")


def extract_fields(
    text: str,
    markers: Sequence[str],
    error: type[DomainError],
    order_error: Optional[type[DomainError]] = None,
) -> tuple[str, ...]:
    """Extract the labeled fields of a command.

    Args:
        text: Command text holding the markers
        markers: Markers in their required order
        error: Raised when a marker is missing or a field is empty
        order_error: Raised when markers are out of order (defaults to ``error``)

    Returns:
        Trimmed field texts, one per marker, in marker order

    Raises:
        DomainError: ``error`` or ``order_error`` as described above
    """
    if any(marker not in text for marker in markers):
        raise error()

    positions = [text.index(marker) for marker in markers]
    if any(earlier > later for earlier, later in zip(positions, positions[1:])):
        raise (order_error or error)()

    ends = positions[1:] + [len(text)]
    fields = tuple(
        text[position + len(marker):end].strip()
        for marker, position, end in zip(markers, positions, ends)
    )
    if any(not field for field in fields):
        raise error()
    return fields


def parse_index(
    text: str,
    count: int,
    error: type[DomainError],
    *,
    missing_error: Optional[type[DomainError]] = None,
    number_error: Optional[type[DomainError]] = None,
) -> int:
    """Parse a 1-based index typed by the user.

    Args:
        text: Text holding only the index
        count: Current number of records in the collection
        error: Raised when the index is outside 1..count
        missing_error: Raised when no index is given (defaults to ``error``)
        number_error: Raised when the index is not an integer (defaults to ``error``)

    Returns:
        0-based index
    """
    text = text.strip()
    if not text:
        raise (missing_error or error)()
    if not _INDEX_PATTERN.fullmatch(text):
        raise (number_error or error)()

    index = int(text)
    if index < 1 or index > count:
        raise error()
    return index - 1


def match_prefix(line: str) -> tuple[Optional[tuple[str, Optional[str]]], str]:
    """Match the leading command words case-insensitively.

    Returns:
        ((action, kind), remainder) or (None, line) if nothing matches
    """
    lowered = line.lower()
    for prefix, action, kind in COMMAND_PREFIXES:
        if lowered.startswith(prefix):
            return (action, kind), line[len(prefix):]
    return None, line


def _parse_edit(
    rest: str,
    markers: Sequence[str],
    count: int,
    format_error: type[DomainError],
    index_error: type[DomainError],
) -> tuple[tuple[str, ...], int]:
    """Parse "<INDEX> d/... a/..." where the index sits before the first marker."""
    fields = extract_fields(rest, markers, format_error)
    index = parse_index(rest[:rest.index(DESCRIPTION)], count, index_error)
    return fields, index


def parse_command(line: str, counts: Mapping[str, int]) -> Command:
    """Parse one input line.

    Args:
        line: Raw user input
        counts: Current size of each entity collection, keyed by kind

    Returns:
        Parsed command; ``action`` is "unknown" for unrecognized input

    Raises:
        DomainError: A command-specific format or index error
    """
    line = line.strip()
    match, rest = match_prefix(line)
    if match is None:
        return UNKNOWN
    action, kind = match

    if action in ("list", "overview", "help", "bye"):
        return Command(action=action, kind=kind)

    if action == "add":
        if kind == LOAN:
            fields = extract_fields(rest, LOAN_MARKERS, AddLoanFormatError)
        elif kind == INCOME:
            fields = extract_fields(rest, INCOME_MARKERS, AddIncomeFormatError)
        elif kind == EXPENSE:
            fields = extract_fields(rest, EXPENSE_MARKERS, AddExpenseFormatError)
        else:
            fields = extract_fields(
                rest, INVESTMENT_MARKERS, AddInvestmentMissingFieldError, AddInvestmentOrderError
            )
        return Command(action=action, kind=kind, fields=fields)

    if action == "edit":
        if kind == LOAN:
            fields, index = _parse_edit(
                rest, LOAN_MARKERS, counts[LOAN], EditLoanFormatError, EditLoanIndexError
            )
        else:
            fields, index = _parse_edit(
                rest, INCOME_MARKERS, counts[INCOME], EditIncomeFormatError, EditIncomeIndexError
            )
        return Command(action=action, kind=kind, fields=fields, index=index)

    if action == "delete":
        if kind == LOAN:
            index = parse_index(rest, counts[LOAN], DeleteLoanIndexError)
        elif kind == INCOME:
            index = parse_index(rest, counts[INCOME], DeleteIncomeIndexError)
        elif kind == EXPENSE:
            index = parse_index(rest, counts[EXPENSE], DeleteExpenseIndexError)
        else:
            index = parse_index(
                rest,
                counts[INVESTMENT],
                DeleteInvestmentIndexError,
                missing_error=DeleteInvestmentMissingIndexError,
                number_error=DeleteInvestmentNumberFormatError,
            )
        return Command(action=action, kind=kind, index=index)

    if action == "repaid":
        return Command(action=action, kind=kind, index=parse_index(rest, counts[LOAN], LoanRepaidIndexError))

    return Command(
        action=action, kind=kind, index=parse_index(rest, counts[LOAN], LoanNotRepaidIndexError)
    )
