"""Shared domain error messages and error types."""

from finsight.utils.amount_parser import MAX_AMOUNT

LARGEST_AMOUNT = f"{MAX_AMOUNT:,}"
LOAN_DATE_FORMAT_HINT = "where <LOAN_RETURN_DATE_AND_TIME> is of format 'dd-MM-yyyy HH:mm'"


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling. Every subclass carries a
    default remediation message so it can be raised without arguments.
    """

    default_message = "Invalid command."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class CommandFormatError(DomainError):
    """Command text does not match the expected grammar."""


class IndexOutOfRangeError(DomainError):
    """Target index is missing, not an integer or outside the collection."""


class InvalidAmountError(DomainError):
    """Amount is zero or negative where a positive value is required."""


class PastDateError(DomainError):
    """Date lies in the past where a future date is required."""


class CorruptedRecordError(DomainError):
    """A persisted value violates domain constraints."""

    def __init__(self, entity: str, field: str, value: str, rule: str, file_name: str):
        self.entity = entity
        self.field = field
        self.value = value
        self.file_name = file_name
        super().__init__(corrupted_record(entity, field, value, rule, file_name))


class PersistenceError(OSError):
    """Raised when reading or writing a data file fails."""


def corrupted_record(entity: str, field: str, value: str, rule: str, file_name: str) -> str:
    """Return message for a persisted value that failed validation."""
    return (
        f"This {entity} record contains the corrupted {field} [{value}]. {rule}\n"
        f"Please rectify the data in {file_name} file and restart the program."
    )


def wrong_format(command: str, usage: str, *notes: str) -> str:
    """Return message for a command typed in the wrong format."""
    lines = [f"{command} Command is in the wrong format. Please try again with the format:", f"\t{usage}"]
    lines.extend(notes)
    return "\n".join(lines)


def index_out_of_range(command: str, usage: str, list_command: str) -> str:
    """Return message for a missing or non-existing index."""
    return (
        f"{command} index is invalid or does not exist. Please try again with the format:\n"
        f"\t{usage}\n"
        f"where <INDEX> is an integer and an existing index shown by the '{list_command}' command"
    )


# Loan

ADD_LOAN_USAGE = "add loan d/<DESCRIPTION> a/<AMOUNT_LOANED> r/<LOAN_RETURN_DATE_AND_TIME>"
EDIT_LOAN_USAGE = "edit loan <INDEX> d/<DESCRIPTION> a/<AMOUNT_LOANED> r/<LOAN_RETURN_DATE_AND_TIME>"
LOAN_AMOUNT_HINT = f"and <AMOUNT_LOANED> is a positive number of at least 0.01 and up to {LARGEST_AMOUNT}"


class AddLoanFormatError(CommandFormatError):
    default_message = wrong_format("Add Loan", ADD_LOAN_USAGE, LOAN_DATE_FORMAT_HINT, LOAN_AMOUNT_HINT)


class AddLoanInvalidAmountError(InvalidAmountError):
    default_message = (
        "Amount Loaned cannot be negative or zero. Please try again with the format:\n"
        f"\t{ADD_LOAN_USAGE}\n{LOAN_DATE_FORMAT_HINT}\n{LOAN_AMOUNT_HINT}"
    )


class AddLoanPastDateError(PastDateError):
    default_message = (
        "Loan Return Date is in the past. Please try again with the format:\n"
        f"\t{ADD_LOAN_USAGE}\n{LOAN_DATE_FORMAT_HINT}"
    )


class EditLoanFormatError(CommandFormatError):
    default_message = wrong_format("Edit Loan", EDIT_LOAN_USAGE, LOAN_DATE_FORMAT_HINT, LOAN_AMOUNT_HINT)


class EditLoanInvalidAmountError(InvalidAmountError):
    default_message = (
        "Amount Loaned cannot be negative or zero. Please try again with the format:\n"
        f"\t{EDIT_LOAN_USAGE}\n{LOAN_DATE_FORMAT_HINT}\n{LOAN_AMOUNT_HINT}"
    )


class EditLoanPastDateError(PastDateError):
    default_message = (
        "Loan Return Date is in the past. Please try again with the format:\n"
        f"\t{EDIT_LOAN_USAGE}\n{LOAN_DATE_FORMAT_HINT}"
    )


class EditLoanIndexError(IndexOutOfRangeError):
    default_message = index_out_of_range("Edit Loan", EDIT_LOAN_USAGE, "list loan")


class DeleteLoanIndexError(IndexOutOfRangeError):
    default_message = index_out_of_range("Delete Loan", "delete loan <INDEX>", "list loan")


class LoanRepaidIndexError(IndexOutOfRangeError):
    default_message = index_out_of_range("Loan Repaid", "loan repaid <INDEX>", "list loan")


class LoanNotRepaidIndexError(IndexOutOfRangeError):
    default_message = index_out_of_range("Loan Not Repaid", "loan not repaid <INDEX>", "list loan")


# Income

ADD_INCOME_USAGE = "add income d/<DESCRIPTION> a/<AMOUNT_EARNED>"
EDIT_INCOME_USAGE = "edit income <INDEX> d/<DESCRIPTION> a/<AMOUNT_EARNED>"
INCOME_AMOUNT_HINT = f"where <AMOUNT_EARNED> is a positive number up to {LARGEST_AMOUNT}"


class AddIncomeFormatError(CommandFormatError):
    default_message = wrong_format("Add Income", ADD_INCOME_USAGE, INCOME_AMOUNT_HINT)


class EditIncomeFormatError(CommandFormatError):
    default_message = wrong_format("Edit Income", EDIT_INCOME_USAGE, INCOME_AMOUNT_HINT)


class EditIncomeIndexError(IndexOutOfRangeError):
    default_message = index_out_of_range("Edit Income", EDIT_INCOME_USAGE, "list income")


class DeleteIncomeIndexError(IndexOutOfRangeError):
    default_message = index_out_of_range("Delete Income", "delete income <INDEX>", "list income")


# Expense

ADD_EXPENSE_USAGE = "add expense d/<DESCRIPTION> a/<AMOUNT_SPENT>"
EXPENSE_AMOUNT_HINT = f"where <AMOUNT_SPENT> is a positive number up to {LARGEST_AMOUNT}"


class AddExpenseFormatError(CommandFormatError):
    default_message = wrong_format("Add Expense", ADD_EXPENSE_USAGE, EXPENSE_AMOUNT_HINT)


class DeleteExpenseIndexError(IndexOutOfRangeError):
    default_message = index_out_of_range("Delete Expense", "delete expense <INDEX>", "list expense")


# Investment

ADD_INVESTMENT_USAGE = (
    "add investment d/<DESCRIPTION> a/<AMOUNT_INVESTED_MONTHLY> "
    "r/<ANNUAL_RETURN_RATE> m/<DEPOSIT_DATE_EACH_MONTH>"
)
INVESTMENT_NUMBERS_HINT = (
    "where <AMOUNT_INVESTED_MONTHLY> and <ANNUAL_RETURN_RATE> are positive numbers "
    f"up to {LARGEST_AMOUNT} and "
    "<DEPOSIT_DATE_EACH_MONTH> is a whole number between 1 and 31"
)


class AddInvestmentMissingFieldError(CommandFormatError):
    default_message = (
        "Add Investment Command has missing subcommands. Please try again with the format:\n"
        f"\t{ADD_INVESTMENT_USAGE}\n{INVESTMENT_NUMBERS_HINT}"
    )


class AddInvestmentOrderError(CommandFormatError):
    default_message = (
        "Add Investment Command has its subcommands in the wrong order. Please try again with the format:\n"
        f"\t{ADD_INVESTMENT_USAGE}\n{INVESTMENT_NUMBERS_HINT}"
    )


class AddInvestmentNumberFormatError(CommandFormatError):
    default_message = wrong_format("Add Investment", ADD_INVESTMENT_USAGE, INVESTMENT_NUMBERS_HINT)


class AddInvestmentDayOutOfRangeError(CommandFormatError):
    default_message = (
        "Add Investment Command has a recurring deposit date outside the span of dates in a month.\n"
        "<DEPOSIT_DATE_EACH_MONTH> must be between 1 and 31 (inclusive)."
    )


class DeleteInvestmentMissingIndexError(IndexOutOfRangeError):
    default_message = (
        "Delete Investment Command has missing target index. Please try again with the format:\n"
        "\tdelete investment <INDEX>\n"
        "where <INDEX> is a number within the span of investments shown by the 'list investment' command"
    )


class DeleteInvestmentNumberFormatError(IndexOutOfRangeError):
    default_message = (
        "Delete Investment Command is in the wrong format. Please try again with the format:\n"
        "\tdelete investment <INDEX>"
    )


class DeleteInvestmentIndexError(IndexOutOfRangeError):
    default_message = index_out_of_range(
        "Delete Investment", "delete investment <INDEX>", "list investment"
    )
