"""Expense domain service."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from finsight.domain.entities import Expense
from finsight.domain.errors import AddExpenseFormatError
from finsight.utils.amount_parser import parse_positive_amount

if TYPE_CHECKING:
    from finsight.cli.presenter import Presenter
    from finsight.storage.base import RecordStore


def create_expense(description: str, amount: str) -> Expense:
    """Build an expense from command fields.

    Raises:
        AddExpenseFormatError: If the amount is not a positive number
    """
    try:
        expense_amount = parse_positive_amount(amount)
    except ValueError as e:
        raise AddExpenseFormatError() from e
    return Expense(description=description, amount=expense_amount)


class ExpenseService:
    """Service for managing the expense list."""

    def __init__(self, store: RecordStore[Expense], presenter: Presenter):
        self.store = store
        self.presenter = presenter
        self.expenses: list[Expense] = store.try_load(on_error=presenter.show_error)

    @property
    def count(self) -> int:
        return len(self.expenses)

    def total(self) -> Decimal:
        return sum((expense.amount for expense in self.expenses), Decimal(0))

    def list_expenses(self) -> None:
        self.presenter.show_expenses(self.expenses)

    def add_expense(self, expense: Expense) -> None:
        self.expenses.append(expense)
        self.store.append(expense)
        self.presenter.show_added("Expense", self.presenter.describe_expense(expense))

    def delete_expense(self, index: int) -> Expense:
        expense = self.expenses.pop(index)
        self.store.write_all(self.expenses)
        self.presenter.show_deleted("Expense", self.presenter.describe_expense(expense))
        return expense
