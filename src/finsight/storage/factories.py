"""Factory functions for creating the record stores of one data directory."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from finsight.config.settings import (
    EXPENSE_FILE,
    INCOME_FILE,
    INVESTMENT_FILE,
    LOAN_FILE,
    resolve_data_dir,
)
from finsight.domain.entities import Expense, Income, Investment, Loan
from finsight.storage.base import RecordStore
from finsight.storage.codecs import ExpenseCodec, IncomeCodec, InvestmentCodec, LoanCodec


@dataclass(frozen=True)
class RecordStores:
    """One record store per entity kind."""

    loans: RecordStore[Loan]
    incomes: RecordStore[Income]
    expenses: RecordStore[Expense]
    investments: RecordStore[Investment]


def create_record_stores(data_dir: Optional[str | Path] = None) -> RecordStores:
    """Create the record stores backed by files in one directory.

    Args:
        data_dir: Directory for the data files. If None, checks the
            FINSIGHT_DATA_DIR environment variable, then defaults to ./data

    Returns:
        RecordStores for loans, incomes, expenses and investments
    """
    directory = resolve_data_dir(data_dir)
    return RecordStores(
        loans=RecordStore(directory / LOAN_FILE, LoanCodec(LOAN_FILE)),
        incomes=RecordStore(directory / INCOME_FILE, IncomeCodec(INCOME_FILE)),
        expenses=RecordStore(directory / EXPENSE_FILE, ExpenseCodec(EXPENSE_FILE)),
        investments=RecordStore(directory / INVESTMENT_FILE, InvestmentCodec(INVESTMENT_FILE)),
    )
