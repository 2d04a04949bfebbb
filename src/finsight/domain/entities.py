"""Domain model entities for finsight.

These are plain data classes representing the records a user keeps, kept
independent of the flat-file line format so the storage codecs can change
without touching business logic. They are mutable: status toggles and edits
update a record in place inside its collection.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Loan:
    """Money lent out, to be returned by a deadline."""

    description: str
    amount: Decimal
    return_by: datetime
    repaid: bool = False

    def status(self, now: datetime | None = None) -> str:
        """Return 'repaid', 'OVERDUE' or 'outstanding'."""
        if self.repaid:
            return "repaid"
        if self.return_by < (now or datetime.now()):
            return "OVERDUE"
        return "outstanding"


@dataclass
class Income:
    """Money earned."""

    description: str
    amount: Decimal


@dataclass
class Expense:
    """Money spent."""

    description: str
    amount: Decimal


@dataclass
class Investment:
    """Recurring monthly deposit with an expected annual return rate (percent)."""

    description: str
    amount: Decimal
    return_rate: Decimal
    deposit_day: int

    def projected_value(self, years: int) -> Decimal:
        """Return the value of the deposits after ``years`` with monthly compounding."""
        months = 12 * years
        monthly_rate = self.return_rate / Decimal(100) / Decimal(12)
        if monthly_rate == 0:
            return self.amount * months
        growth = (1 + monthly_rate) ** months
        return self.amount * (growth - 1) / monthly_rate
