"""Terminal presentation of command results."""

from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Mapping, Optional, Sequence

import click

from finsight.domain.entities import Expense, Income, Investment, Loan
from finsight.utils.amount_parser import format_money
from finsight.utils.date_parser import format_display_date, next_deposit_date

RULE = "-" * 60

COMMAND_LIST = (
    "list loan",
    "add loan d/<DESCRIPTION> a/<AMOUNT_LOANED> r/<LOAN_RETURN_DATE_AND_TIME>\n"
    "   where <LOAN_RETURN_DATE_AND_TIME> is of format 'dd-MM-yyyy HH:mm'",
    "delete loan <INDEX>",
    "loan repaid <INDEX>",
    "loan not repaid <INDEX>",
    "edit loan <INDEX> d/<DESCRIPTION> a/<AMOUNT_LOANED> r/<LOAN_RETURN_DATE_AND_TIME>\n"
    "   where <LOAN_RETURN_DATE_AND_TIME> is of format 'dd-MM-yyyy HH:mm'",
    "list expense",
    "add expense d/<DESCRIPTION> a/<AMOUNT_SPENT>",
    "delete expense <INDEX>",
    "list income",
    "add income d/<DESCRIPTION> a/<AMOUNT_EARNED>",
    "delete income <INDEX>",
    "edit income <INDEX> d/<DESCRIPTION> a/<AMOUNT_EARNED>",
    "list income overview",
    "list investment",
    "add investment d/<DESCRIPTION> a/<AMOUNT_INVESTED_MONTHLY> r/<ANNUAL_RETURN_RATE> "
    "m/<DEPOSIT_DATE_EACH_MONTH>",
    "delete investment <INDEX>",
    "help",
    "bye",
)


class Presenter:
    """Writes command results to the terminal with ``click.echo``.

    Results go to stdout, errors to stderr. ``now`` and ``today`` are
    injectable so loan status and deposit dates can be rendered
    deterministically.
    """

    def __init__(
        self,
        now: Callable[[], datetime] = datetime.now,
        today: Callable[[], date] = date.today,
    ):
        self.now = now
        self.today = today

    def _block(self, *lines: str, err: bool = False) -> None:
        click.echo(RULE, err=err)
        for line in lines:
            click.echo(line, err=err)
        click.echo(RULE, err=err)

    # Record descriptions

    def describe_loan(self, loan: Loan) -> str:
        return (
            f"[{loan.status(self.now())}]\n"
            f"Description: {loan.description}\n"
            f"Amount: {format_money(loan.amount)}\n"
            f"Repayment Deadline: {format_display_date(loan.return_by)}"
        )

    def describe_income(self, income: Income) -> str:
        return f"Description: {income.description}\nAmount: {format_money(income.amount)}"

    def describe_expense(self, expense: Expense) -> str:
        return f"Description: {expense.description}\nAmount: {format_money(expense.amount)}"

    def describe_investment(self, investment: Investment) -> str:
        deposit = next_deposit_date(investment.deposit_day, self.today())
        return (
            f"Description: {investment.description}\n"
            f"Amount: {format_money(investment.amount)}\n"
            f"Annual Return Rate: {investment.return_rate:f}%\n"
            f"Recurring Deposit Date of Month: {investment.deposit_day}\n"
            f"Next Deposit: {deposit:%d %b %Y}"
        )

    # Session

    def show_welcome(self) -> None:
        self._block("Welcome to FinSight, what can I do for you?")

    def show_bye(self) -> None:
        self._block("Goodbye, see you again!")

    def show_commands(self, heading: Optional[str] = None) -> None:
        lines = [heading] if heading else []
        lines.extend(f"{number}. {command}" for number, command in enumerate(COMMAND_LIST, start=1))
        self._block(*lines)

    def show_error(self, error: Exception) -> None:
        self._block(str(error), err=True)

    # Record changes

    def show_added(self, label: str, description: str) -> None:
        self._block(f"Added {label}:", description)

    def show_deleted(self, label: str, description: str) -> None:
        self._block(f"Deleted {label}:", description)

    def show_edited(self, label: str, description: str) -> None:
        self._block(f"Edited {label}:", description)

    def show_loan_status(self, loan: Loan) -> None:
        heading = "Set Loan as Repaid:" if loan.repaid else "Set Loan as Not Repaid:"
        self._block(heading, self.describe_loan(loan))

    def show_duplicate_loan_reminder(self, description: str) -> None:
        self._block(f"Reminder: a loan described as '{description}' is already in the list.")

    # Listings

    def _show_list(self, label: str, descriptions: Sequence[str], empty_message: str) -> None:
        if not descriptions:
            self._block(empty_message)
            return
        lines = []
        for number, description in enumerate(descriptions, start=1):
            lines.append(f"{label} {number}:")
            lines.append(description)
        self._block(*lines)

    def show_loans(self, loans: Sequence[Loan]) -> None:
        self._show_list("Loan", [self.describe_loan(loan) for loan in loans], "No loans found.")

    def show_incomes(self, incomes: Sequence[Income]) -> None:
        self._show_list(
            "Income", [self.describe_income(income) for income in incomes], "No incomes found."
        )

    def show_expenses(self, expenses: Sequence[Expense]) -> None:
        self._show_list(
            "Expense", [self.describe_expense(expense) for expense in expenses], "No expenses found."
        )

    def show_investments(
        self, investments: Sequence[Investment], projections: Mapping[int, Decimal]
    ) -> None:
        if not investments:
            self._block("No investments found.")
            return
        self._show_list(
            "Investment",
            [self.describe_investment(investment) for investment in investments],
            "No investments found.",
        )
        self._block(
            *(
                f"Overall returns after {years} Years: {format_money(total)}"
                for years, total in projections.items()
            )
        )

    def show_income_overview(self, total_income: Decimal, total_expense: Decimal) -> None:
        self._block(
            f"Total Income: {format_money(total_income)}",
            f"Total Expense: {format_money(total_expense)}",
            f"Remaining Income: {format_money(total_income - total_expense)}",
        )
