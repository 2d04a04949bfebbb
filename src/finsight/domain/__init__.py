"""Domain layer for finsight application."""

from finsight.domain.loan import LoanService
from finsight.domain.income import IncomeService
from finsight.domain.expense import ExpenseService
from finsight.domain.investment import InvestmentService

__all__ = [
    "LoanService",
    "IncomeService",
    "ExpenseService",
    "InvestmentService",
]
