"""Data directory and file name resolution."""

import os
from pathlib import Path
from typing import Optional

DATA_DIR_ENV = "FINSIGHT_DATA_DIR"
DEFAULT_DATA_DIR = Path("data")

LOAN_FILE = "loan.txt"
INCOME_FILE = "income.txt"
EXPENSE_FILE = "expense.txt"
INVESTMENT_FILE = "invest.txt"


def resolve_data_dir(data_dir: Optional[str | Path] = None) -> Path:
    """Resolve the directory holding the data files.

    Args:
        data_dir: Explicit directory. If None, checks the FINSIGHT_DATA_DIR
            environment variable, then defaults to ./data

    Returns:
        Directory path (not created here; stores create it on first use)
    """
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV) or None

    if data_dir is None:
        return DEFAULT_DATA_DIR

    return Path(data_dir).expanduser()
