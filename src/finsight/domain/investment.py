"""Investment domain service."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from finsight.domain.entities import Investment
from finsight.domain.errors import (
    AddInvestmentDayOutOfRangeError,
    AddInvestmentNumberFormatError,
)
from finsight.utils.amount_parser import parse_positive_amount
from finsight.utils.date_parser import parse_day_number

if TYPE_CHECKING:
    from finsight.cli.presenter import Presenter
    from finsight.storage.base import RecordStore

PROJECTION_YEARS = (5, 10)


def create_investment(description: str, amount: str, return_rate: str, deposit_day: str) -> Investment:
    """Build an investment from command fields.

    Args:
        description: Investment description
        amount: Amount deposited each month, greater than zero
        return_rate: Expected annual return in percent, greater than zero
        deposit_day: Day of month of the deposit, 1 to 31

    Raises:
        AddInvestmentNumberFormatError: If a number cannot be parsed or is not positive
        AddInvestmentDayOutOfRangeError: If the deposit day is outside 1 to 31
    """
    try:
        investment_amount = parse_positive_amount(amount)
        investment_rate = parse_positive_amount(return_rate)
        day = parse_day_number(deposit_day)
    except ValueError as e:
        raise AddInvestmentNumberFormatError() from e

    if not 1 <= day <= 31:
        raise AddInvestmentDayOutOfRangeError()

    return Investment(
        description=description,
        amount=investment_amount,
        return_rate=investment_rate,
        deposit_day=day,
    )


class InvestmentService:
    """Service for managing the investment list."""

    def __init__(self, store: RecordStore[Investment], presenter: Presenter):
        """Initialize investment service and load persisted investments.

        Args:
            store: Record store backing the investment list
            presenter: Presentation channel for results and load errors
        """
        self.store = store
        self.presenter = presenter
        self.investments: list[Investment] = store.try_load(on_error=presenter.show_error)

    @property
    def count(self) -> int:
        return len(self.investments)

    def projected_total(self, years: int) -> Decimal:
        """Sum of the projected values of every investment after ``years``."""
        return sum(
            (investment.projected_value(years) for investment in self.investments),
            Decimal(0),
        )

    def list_investments(self) -> None:
        projections = {years: self.projected_total(years) for years in PROJECTION_YEARS}
        self.presenter.show_investments(self.investments, projections)

    def add_investment(self, investment: Investment) -> None:
        self.investments.append(investment)
        self.store.append(investment)
        self.presenter.show_added("Investment", self.presenter.describe_investment(investment))

    def delete_investment(self, index: int) -> Investment:
        investment = self.investments.pop(index)
        self.store.write_all(self.investments)
        self.presenter.show_deleted("Investment", self.presenter.describe_investment(investment))
        return investment
