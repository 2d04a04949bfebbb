"""Income domain service."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from finsight.domain.entities import Income
from finsight.domain.errors import AddIncomeFormatError, EditIncomeFormatError
from finsight.utils.amount_parser import parse_positive_amount

if TYPE_CHECKING:
    from finsight.cli.presenter import Presenter
    from finsight.storage.base import RecordStore


def create_income(description: str, amount: str, *, edit: bool = False) -> Income:
    """Build an income from command fields.

    Raises:
        CommandFormatError: If the amount is not a positive number
    """
    try:
        income_amount = parse_positive_amount(amount)
    except ValueError as e:
        raise (EditIncomeFormatError if edit else AddIncomeFormatError)() from e
    return Income(description=description, amount=income_amount)


class IncomeService:
    """Service for managing the income list."""

    def __init__(self, store: RecordStore[Income], presenter: Presenter):
        """Initialize income service and load persisted incomes.

        Args:
            store: Record store backing the income list
            presenter: Presentation channel for results and load errors
        """
        self.store = store
        self.presenter = presenter
        self.incomes: list[Income] = store.try_load(on_error=presenter.show_error)

    @property
    def count(self) -> int:
        return len(self.incomes)

    def total(self) -> Decimal:
        return sum((income.amount for income in self.incomes), Decimal(0))

    def list_incomes(self) -> None:
        self.presenter.show_incomes(self.incomes)

    def add_income(self, income: Income) -> None:
        """Add an income and append it to the data file."""
        self.incomes.append(income)
        self.store.append(income)
        self.presenter.show_added("Income", self.presenter.describe_income(income))

    def delete_income(self, index: int) -> Income:
        """Delete the income at a 0-based index and rewrite the data file."""
        income = self.incomes.pop(index)
        self.store.write_all(self.incomes)
        self.presenter.show_deleted("Income", self.presenter.describe_income(income))
        return income

    def edit_income(self, index: int, description: str, amount: Decimal) -> Income:
        """Update description and amount of the income at a 0-based index."""
        income = self.incomes[index]
        income.description = description
        income.amount = amount
        self.store.write_all(self.incomes)
        self.presenter.show_edited("Income", self.presenter.describe_income(income))
        return income

    def show_overview(self, total_expense: Decimal) -> None:
        """Show total income against total expense."""
        self.presenter.show_income_overview(self.total(), total_expense)
