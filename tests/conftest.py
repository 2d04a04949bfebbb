"""Shared pytest fixtures for finsight tests."""

import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from finsight.cli.dispatcher import Dispatcher
from finsight.cli.presenter import Presenter
from finsight.domain.entities import Expense, Income, Investment, Loan
from finsight.domain.expense import ExpenseService
from finsight.domain.income import IncomeService
from finsight.domain.investment import InvestmentService
from finsight.domain.loan import LoanService
from finsight.storage.factories import create_record_stores

FIXED_NOW = datetime(2026, 1, 15, 12, 0)
FIXED_TODAY = date(2026, 1, 15)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    finsight_logger = logging.getLogger("finsight")
    finsight_level = finsight_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    finsight_logger.setLevel(finsight_level)


@pytest.fixture
def data_dir(tmp_path):
    """Return a fresh directory for data files."""
    return tmp_path / "data"


@pytest.fixture
def stores(data_dir):
    """Create record stores backed by the temporary data directory."""
    return create_record_stores(data_dir)


@pytest.fixture
def presenter():
    """Create a presenter with a fixed clock."""
    return Presenter(now=lambda: FIXED_NOW, today=lambda: FIXED_TODAY)


@pytest.fixture
def loan_service(stores, presenter):
    """Create a LoanService over an empty data file."""
    return LoanService(stores.loans, presenter)


@pytest.fixture
def income_service(stores, presenter):
    """Create an IncomeService over an empty data file."""
    return IncomeService(stores.incomes, presenter)


@pytest.fixture
def expense_service(stores, presenter):
    """Create an ExpenseService over an empty data file."""
    return ExpenseService(stores.expenses, presenter)


@pytest.fixture
def investment_service(stores, presenter):
    """Create an InvestmentService over an empty data file."""
    return InvestmentService(stores.investments, presenter)


@pytest.fixture
def dispatcher(loan_service, income_service, expense_service, investment_service, presenter):
    """Create a Dispatcher over empty collections."""
    return Dispatcher(
        loans=loan_service,
        incomes=income_service,
        expenses=expense_service,
        investments=investment_service,
        presenter=presenter,
    )


@pytest.fixture
def sample_loan():
    """A loan due well in the future."""
    return Loan(
        description="Lent to Alex",
        amount=Decimal("250.50"),
        return_by=datetime(2126, 10, 10, 19, 0),
    )


@pytest.fixture
def sample_income():
    return Income(description="Salary", amount=Decimal("3000"))


@pytest.fixture
def sample_expense():
    return Expense(description="Groceries", amount=Decimal("45.20"))


@pytest.fixture
def sample_investment():
    return Investment(
        description="Index fund",
        amount=Decimal("100"),
        return_rate=Decimal("6"),
        deposit_day=20,
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
