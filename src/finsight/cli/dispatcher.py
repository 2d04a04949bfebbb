"""Command dispatch and the interactive read loop."""

from typing import Iterable, Optional

import structlog

from finsight.cli.parser import EXPENSE, INCOME, INVESTMENT, LOAN, Command, parse_command
from finsight.cli.presenter import Presenter
from finsight.domain.errors import DomainError, PersistenceError
from finsight.domain.expense import ExpenseService, create_expense
from finsight.domain.income import IncomeService, create_income
from finsight.domain.investment import InvestmentService, create_investment
from finsight.domain.loan import LoanService, create_loan
from finsight.storage.factories import RecordStores

logger = structlog.get_logger(__name__)


class Dispatcher:
    """Runs parsed commands against the entity services.

    This is the recovery boundary: a command that fails is reported through
    the presenter and never ends the session.
    """

    def __init__(
        self,
        loans: LoanService,
        incomes: IncomeService,
        expenses: ExpenseService,
        investments: InvestmentService,
        presenter: Presenter,
    ):
        self.loans = loans
        self.incomes = incomes
        self.expenses = expenses
        self.investments = investments
        self.presenter = presenter

    @classmethod
    def from_stores(cls, stores: RecordStores, presenter: Presenter) -> "Dispatcher":
        """Create services over the given stores, loading their records."""
        return cls(
            loans=LoanService(stores.loans, presenter),
            incomes=IncomeService(stores.incomes, presenter),
            expenses=ExpenseService(stores.expenses, presenter),
            investments=InvestmentService(stores.investments, presenter),
            presenter=presenter,
        )

    def counts(self) -> dict[str, int]:
        return {
            LOAN: self.loans.count,
            INCOME: self.incomes.count,
            EXPENSE: self.expenses.count,
            INVESTMENT: self.investments.count,
        }

    def execute(self, line: str) -> bool:
        """Parse and run one input line.

        Returns:
            False if the line ends the session, True otherwise
        """
        try:
            command = parse_command(line, self.counts())
            logger.debug("parsed command", action=command.action, kind=command.kind)
            return self.run(command)
        except DomainError as e:
            logger.info("command rejected", error_type=type(e).__name__)
            self.presenter.show_error(e)
        except PersistenceError as e:
            logger.error("persistence failed", error=str(e))
            self.presenter.show_error(e)
        return True

    def run(self, command: Command) -> bool:
        """Run a parsed command; see ``execute`` for the return value."""
        action, kind = command.action, command.kind

        if action == "bye":
            return False
        if action == "help":
            self.presenter.show_commands()
        elif action == "unknown":
            self.presenter.show_commands("Invalid command. Please use one of the following commands:")
        elif kind == LOAN:
            self._run_loan(command)
        elif kind == INCOME:
            self._run_income(command)
        elif kind == EXPENSE:
            self._run_expense(command)
        elif kind == INVESTMENT:
            self._run_investment(command)
        return True

    def _remind_if_duplicate_loan(self, description: str, exclude: Optional[int] = None) -> None:
        if self.loans.has_description(description, exclude):
            self.presenter.show_duplicate_loan_reminder(description)

    def _run_loan(self, command: Command) -> None:
        if command.action == "list":
            self.loans.list_loans()
        elif command.action == "add":
            loan = create_loan(*command.fields)
            self._remind_if_duplicate_loan(loan.description)
            self.loans.add_loan(loan)
        elif command.action == "edit":
            loan = create_loan(*command.fields, edit=True)
            self._remind_if_duplicate_loan(loan.description, command.index)
            self.loans.edit_loan(command.index, loan)
        elif command.action == "delete":
            self.loans.delete_loan(command.index)
        elif command.action == "repaid":
            self.loans.set_repaid(command.index)
        elif command.action == "not_repaid":
            self.loans.set_not_repaid(command.index)

    def _run_income(self, command: Command) -> None:
        if command.action == "list":
            self.incomes.list_incomes()
        elif command.action == "overview":
            self.incomes.show_overview(self.expenses.total())
        elif command.action == "add":
            self.incomes.add_income(create_income(*command.fields))
        elif command.action == "edit":
            income = create_income(*command.fields, edit=True)
            self.incomes.edit_income(command.index, income.description, income.amount)
        elif command.action == "delete":
            self.incomes.delete_income(command.index)

    def _run_expense(self, command: Command) -> None:
        if command.action == "list":
            self.expenses.list_expenses()
        elif command.action == "add":
            self.expenses.add_expense(create_expense(*command.fields))
        elif command.action == "delete":
            self.expenses.delete_expense(command.index)

    def _run_investment(self, command: Command) -> None:
        if command.action == "list":
            self.investments.list_investments()
        elif command.action == "add":
            self.investments.add_investment(create_investment(*command.fields))
        elif command.action == "delete":
            self.investments.delete_investment(command.index)


def run_loop(lines: Iterable[str], dispatcher: Dispatcher, presenter: Presenter) -> None:
    """Read commands until "bye" or the end of input.

    Args:
        lines: Input source, one command per item (e.g. a text stream)
        dispatcher: Dispatcher running each command
        presenter: Presenter for the welcome and farewell messages
    """
    presenter.show_welcome()
    for line in lines:
        if not dispatcher.execute(line.rstrip("\r\n")):
            break
    presenter.show_bye()
