"""Line codecs for each entity kind.

Field order per line:

- loan: ``repaidFlag|description|amount|dd-MM-yyyy HH:mm``
- income: ``description|amount``
- expense: ``description|amount``
- investment: ``description|amount|returnRate|dayOfMonth``
"""

from decimal import Decimal

from finsight.domain.entities import Expense, Income, Investment, Loan
from finsight.domain.errors import CorruptedRecordError
from finsight.storage.base import RecordCodec, join_fields, sanitize, unsanitize
from finsight.utils.amount_parser import MAX_AMOUNT, parse_positive_amount
from finsight.utils.date_parser import format_loan_date, parse_day_number, parse_loan_date

REPAID = "1"
NOT_REPAID = "0"

POSITIVE_AMOUNT_RULE = f"Amount should contain ONLY positive numbers up to {MAX_AMOUNT:,}."
POSITIVE_RATE_RULE = f"Rate of return should contain ONLY positive numbers up to {MAX_AMOUNT:,}."
DATE_RULE = "Date should be in <dd-MM-yyyy HH:mm> format."
REPAID_FLAG_RULE = "Repaid flag should be either 0 or 1."
DEPOSIT_DAY_RULE = "A valid day should be between 1 and 31 (inclusive)."


def read_positive(value: str, entity: str, field: str, rule: str, file_name: str) -> Decimal:
    """Parse a stored number that must be greater than zero."""
    try:
        return parse_positive_amount(value)
    except ValueError as e:
        raise CorruptedRecordError(entity, field, value, rule, file_name) from e


class LoanCodec(RecordCodec[Loan]):
    min_fields = 4

    def format(self, record: Loan) -> str:
        return join_fields(
            REPAID if record.repaid else NOT_REPAID,
            sanitize(record.description),
            str(record.amount),
            format_loan_date(record.return_by),
        )

    def parse_fields(self, fields: list[str]) -> Loan:
        flag, description, amount, return_by = fields[:4]
        if flag not in (REPAID, NOT_REPAID):
            raise CorruptedRecordError("loan", "repaid flag", flag, REPAID_FLAG_RULE, self.file_name)
        try:
            return_by_date = parse_loan_date(return_by)
        except ValueError as e:
            raise CorruptedRecordError("loan", "date", return_by, DATE_RULE, self.file_name) from e
        return Loan(
            description=unsanitize(description),
            amount=read_positive(amount, "loan", "amount value", POSITIVE_AMOUNT_RULE, self.file_name),
            return_by=return_by_date,
            repaid=flag == REPAID,
        )


class IncomeCodec(RecordCodec[Income]):
    min_fields = 2

    def format(self, record: Income) -> str:
        return join_fields(sanitize(record.description), str(record.amount))

    def parse_fields(self, fields: list[str]) -> Income:
        description, amount = fields[:2]
        return Income(
            description=unsanitize(description),
            amount=read_positive(amount, "income", "amount value", POSITIVE_AMOUNT_RULE, self.file_name),
        )


class ExpenseCodec(RecordCodec[Expense]):
    min_fields = 2

    def format(self, record: Expense) -> str:
        return join_fields(sanitize(record.description), str(record.amount))

    def parse_fields(self, fields: list[str]) -> Expense:
        description, amount = fields[:2]
        return Expense(
            description=unsanitize(description),
            amount=read_positive(amount, "expense", "amount value", POSITIVE_AMOUNT_RULE, self.file_name),
        )


class InvestmentCodec(RecordCodec[Investment]):
    min_fields = 4

    def format(self, record: Investment) -> str:
        return join_fields(
            sanitize(record.description),
            str(record.amount),
            str(record.return_rate),
            str(record.deposit_day),
        )

    def parse_fields(self, fields: list[str]) -> Investment:
        description, amount, return_rate, deposit_day = fields[:4]
        try:
            day = parse_day_number(deposit_day)
        except ValueError:
            day = 0
        if not 1 <= day <= 31:
            raise CorruptedRecordError(
                "investment", "day of investment", deposit_day, DEPOSIT_DAY_RULE, self.file_name
            )
        return Investment(
            description=unsanitize(description),
            amount=read_positive(
                amount, "investment", "amount value", POSITIVE_AMOUNT_RULE, self.file_name
            ),
            return_rate=read_positive(
                return_rate, "investment", "rate of return value", POSITIVE_RATE_RULE, self.file_name
            ),
            deposit_day=day,
        )
