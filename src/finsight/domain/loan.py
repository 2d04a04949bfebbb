"""Loan domain service."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from finsight.domain.entities import Loan
from finsight.domain.errors import (
    AddLoanFormatError,
    AddLoanInvalidAmountError,
    AddLoanPastDateError,
    EditLoanFormatError,
    EditLoanInvalidAmountError,
    EditLoanPastDateError,
)
from finsight.utils.amount_parser import parse_amount
from finsight.utils.date_parser import parse_loan_date

if TYPE_CHECKING:
    from finsight.cli.presenter import Presenter
    from finsight.storage.base import RecordStore

MINIMUM_LOAN_AMOUNT = Decimal("0.01")


def create_loan(
    description: str,
    amount: str,
    return_by: str,
    now: Optional[datetime] = None,
    *,
    edit: bool = False,
) -> Loan:
    """Build a loan from command fields.

    Args:
        description: Loan description
        amount: Amount loaned, at least 0.01
        return_by: Return deadline in dd-MM-yyyy HH:mm format, not in the past
        now: Reference time for the past-date check (defaults to now)
        edit: Raise the edit-command variants of the errors

    Returns:
        New loan, not yet repaid

    Raises:
        CommandFormatError: If the amount or date cannot be parsed
        InvalidAmountError: If the amount is below 0.01
        PastDateError: If the deadline is in the past
    """
    if edit:
        format_error, amount_error, date_error = (
            EditLoanFormatError,
            EditLoanInvalidAmountError,
            EditLoanPastDateError,
        )
    else:
        format_error, amount_error, date_error = (
            AddLoanFormatError,
            AddLoanInvalidAmountError,
            AddLoanPastDateError,
        )

    try:
        loan_amount = parse_amount(amount)
        loan_return_by = parse_loan_date(return_by)
    except ValueError as e:
        raise format_error() from e

    if loan_return_by < (now or datetime.now()):
        raise date_error()
    if loan_amount < MINIMUM_LOAN_AMOUNT:
        raise amount_error()

    return Loan(description=description, amount=loan_amount, return_by=loan_return_by)


class LoanService:
    """Service for managing the loan list."""

    def __init__(self, store: RecordStore[Loan], presenter: Presenter):
        """Initialize loan service and load persisted loans.

        Args:
            store: Record store backing the loan list
            presenter: Presentation channel for results and load errors
        """
        self.store = store
        self.presenter = presenter
        self.loans: list[Loan] = store.try_load(on_error=presenter.show_error)

    @property
    def count(self) -> int:
        return len(self.loans)

    def has_description(self, description: str, exclude: Optional[int] = None) -> bool:
        """Check if a loan other than ``exclude`` has this exact description."""
        return any(
            loan.description == description
            for index, loan in enumerate(self.loans)
            if index != exclude
        )

    def list_loans(self) -> None:
        self.presenter.show_loans(self.loans)

    def add_loan(self, loan: Loan) -> None:
        """Add a loan and append it to the data file."""
        self.loans.append(loan)
        self.store.append(loan)
        self.presenter.show_added("Loan", self.presenter.describe_loan(loan))

    def delete_loan(self, index: int) -> Loan:
        """Delete the loan at a 0-based index and rewrite the data file."""
        loan = self.loans.pop(index)
        self.store.write_all(self.loans)
        self.presenter.show_deleted("Loan", self.presenter.describe_loan(loan))
        return loan

    def edit_loan(self, index: int, replacement: Loan) -> Loan:
        """Replace description, amount and deadline of a loan, keeping its repaid flag."""
        loan = self.loans[index]
        loan.description = replacement.description
        loan.amount = replacement.amount
        loan.return_by = replacement.return_by
        self.store.write_all(self.loans)
        self.presenter.show_edited("Loan", self.presenter.describe_loan(loan))
        return loan

    def set_repaid(self, index: int) -> Loan:
        loan = self.loans[index]
        loan.repaid = True
        self.store.write_all(self.loans)
        self.presenter.show_loan_status(loan)
        return loan

    def set_not_repaid(self, index: int) -> Loan:
        loan = self.loans[index]
        loan.repaid = False
        self.store.write_all(self.loans)
        self.presenter.show_loan_status(loan)
        return loan
