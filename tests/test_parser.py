"""Tests for the free-text command parser."""

import pytest

from finsight.cli.parser import (
    EXPENSE,
    INCOME,
    INVESTMENT,
    LOAN,
    UNKNOWN,
    Command,
    extract_fields,
    parse_command,
    parse_index,
)
from finsight.domain.errors import (
    AddExpenseFormatError,
    AddIncomeFormatError,
    AddInvestmentMissingFieldError,
    AddInvestmentOrderError,
    AddLoanFormatError,
    CommandFormatError,
    DeleteExpenseIndexError,
    DeleteIncomeIndexError,
    DeleteInvestmentIndexError,
    DeleteInvestmentMissingIndexError,
    DeleteInvestmentNumberFormatError,
    DeleteLoanIndexError,
    EditIncomeFormatError,
    EditIncomeIndexError,
    EditLoanFormatError,
    EditLoanIndexError,
    IndexOutOfRangeError,
    LoanNotRepaidIndexError,
    LoanRepaidIndexError,
)


def counts(loan=0, income=0, expense=0, investment=0):
    return {LOAN: loan, INCOME: income, EXPENSE: expense, INVESTMENT: investment}


class TestCommandMatching:
    """Tests for recognizing command words."""

    @pytest.mark.parametrize(
        "line,action,kind",
        [
            ("list loan", "list", LOAN),
            ("LIST LOAN", "list", LOAN),
            ("list income", "list", INCOME),
            ("list income overview", "overview", INCOME),
            ("list expense", "list", EXPENSE),
            ("list investment", "list", INVESTMENT),
            ("help", "help", None),
            ("bye", "bye", None),
            ("  Bye  ", "bye", None),
        ],
    )
    def test_argument_free_commands(self, line, action, kind):
        assert parse_command(line, counts()) == Command(action=action, kind=kind)

    @pytest.mark.parametrize("line", ["", "   ", "hello", "remove loan 1", "add car d/x a/1"])
    def test_unknown_input_is_not_an_error(self, line):
        """Test unrecognized input yields the unknown command."""
        assert parse_command(line, counts()) is UNKNOWN


class TestAddLoan:
    """Tests for parsing add loan commands."""

    def test_accepts_markers_in_order(self):
        command = parse_command("add loan d/desc a/100 r/10-10-2030 10:00", counts())

        assert command == Command(
            action="add", kind=LOAN, fields=("desc", "100", "10-10-2030 10:00")
        )

    def test_rejects_amount_before_description(self):
        with pytest.raises(AddLoanFormatError):
            parse_command("add loan a/100 d/desc r/10-10-2030 10:00", counts())

    def test_rejects_date_before_amount(self):
        with pytest.raises(AddLoanFormatError):
            parse_command("add loan d/desc r/10-10-2030 10:00 a/100", counts())

    @pytest.mark.parametrize(
        "line",
        [
            "add loan d/desc a/100",
            "add loan a/100 r/10-10-2030 10:00",
            "add loan",
            "add loan d/ a/100 r/10-10-2030 10:00",
            "add loan d/desc a/   r/10-10-2030 10:00",
            "add loan d/desc a/100 r/",
        ],
    )
    def test_rejects_missing_or_empty_fields(self, line):
        with pytest.raises(AddLoanFormatError):
            parse_command(line, counts())

    def test_fields_are_trimmed(self):
        command = parse_command("add loan d/  my loan  a/ 5 r/ 10-10-2030 10:00 ", counts())
        assert command.fields == ("my loan", "5", "10-10-2030 10:00")

    def test_command_word_is_case_insensitive(self):
        command = parse_command("ADD LOAN d/desc a/1 r/10-10-2030 10:00", counts())
        assert command.kind == LOAN


class TestAddOtherKinds:
    """Tests for parsing add income, expense and investment commands."""

    def test_add_income(self):
        command = parse_command("add income d/salary a/3000", counts())
        assert command == Command(action="add", kind=INCOME, fields=("salary", "3000"))

    def test_add_income_wrong_order(self):
        with pytest.raises(AddIncomeFormatError):
            parse_command("add income a/3000 d/salary", counts())

    def test_add_expense(self):
        command = parse_command("add expense d/food a/12.5", counts())
        assert command == Command(action="add", kind=EXPENSE, fields=("food", "12.5"))

    def test_add_expense_empty_amount(self):
        with pytest.raises(AddExpenseFormatError):
            parse_command("add expense d/food a/", counts())

    def test_add_investment(self):
        command = parse_command("add investment d/fund a/100 r/6 m/20", counts())
        assert command == Command(
            action="add", kind=INVESTMENT, fields=("fund", "100", "6", "20")
        )

    def test_add_investment_missing_marker(self):
        with pytest.raises(AddInvestmentMissingFieldError):
            parse_command("add investment d/fund a/100 r/6", counts())

    def test_add_investment_wrong_order(self):
        with pytest.raises(AddInvestmentOrderError):
            parse_command("add investment d/fund a/100 m/20 r/6", counts())

    def test_add_investment_empty_field(self):
        with pytest.raises(AddInvestmentMissingFieldError):
            parse_command("add investment d/fund a/100 r/ m/20", counts())


class TestIndexCommands:
    """Tests for delete and status-toggle index handling."""

    @pytest.mark.parametrize("line", ["delete loan 0", "delete loan 2", "delete loan", "delete loan one"])
    def test_delete_loan_rejects_out_of_range(self, line):
        with pytest.raises(DeleteLoanIndexError):
            parse_command(line, counts(loan=1))

    def test_delete_loan_first(self):
        assert parse_command("delete loan 1", counts(loan=1)) == Command(
            action="delete", kind=LOAN, index=0
        )

    def test_delete_loan_last(self):
        assert parse_command("delete loan 3", counts(loan=3)).index == 2

    def test_delete_income_bounds(self):
        with pytest.raises(DeleteIncomeIndexError):
            parse_command("delete income 3", counts(income=2))
        assert parse_command("delete income 2", counts(income=2)).index == 1

    def test_delete_expense_bounds(self):
        with pytest.raises(DeleteExpenseIndexError):
            parse_command("delete expense -1", counts(expense=2))

    def test_delete_investment_missing_index(self):
        with pytest.raises(DeleteInvestmentMissingIndexError):
            parse_command("delete investment", counts(investment=1))

    def test_delete_investment_not_a_number(self):
        with pytest.raises(DeleteInvestmentNumberFormatError):
            parse_command("delete investment first", counts(investment=1))

    def test_delete_investment_out_of_range(self):
        with pytest.raises(DeleteInvestmentIndexError):
            parse_command("delete investment 2", counts(investment=1))

    def test_index_errors_share_a_base_class(self):
        with pytest.raises(IndexOutOfRangeError):
            parse_command("delete investment x", counts())

    def test_loan_repaid(self):
        assert parse_command("loan repaid 2", counts(loan=2)) == Command(
            action="repaid", kind=LOAN, index=1
        )

    def test_loan_not_repaid(self):
        assert parse_command("loan not repaid 1", counts(loan=2)) == Command(
            action="not_repaid", kind=LOAN, index=0
        )

    def test_loan_repaid_on_empty_list(self):
        with pytest.raises(LoanRepaidIndexError):
            parse_command("loan repaid 1", counts())

    def test_loan_not_repaid_decimal_index(self):
        with pytest.raises(LoanNotRepaidIndexError):
            parse_command("loan not repaid 1.5", counts(loan=2))


class TestEditCommands:
    """Tests for edit loan and edit income."""

    def test_edit_income(self):
        command = parse_command("edit income 2 d/bonus a/50", counts(income=2))
        assert command == Command(action="edit", kind=INCOME, fields=("bonus", "50"), index=1)

    def test_edit_income_missing_index(self):
        with pytest.raises(EditIncomeIndexError):
            parse_command("edit income d/bonus a/50", counts(income=2))

    def test_edit_income_index_out_of_range(self):
        with pytest.raises(EditIncomeIndexError):
            parse_command("edit income 3 d/bonus a/50", counts(income=2))

    def test_edit_income_non_integer_index(self):
        with pytest.raises(EditIncomeIndexError):
            parse_command("edit income 1.5 d/bonus a/50", counts(income=2))

    def test_edit_income_wrong_format(self):
        with pytest.raises(EditIncomeFormatError):
            parse_command("edit income 1 a/50 d/bonus", counts(income=2))

    def test_edit_loan(self):
        command = parse_command("edit loan 1 d/desc a/10 r/10-10-2030 10:00", counts(loan=1))
        assert command == Command(
            action="edit", kind=LOAN, fields=("desc", "10", "10-10-2030 10:00"), index=0
        )

    def test_edit_loan_wrong_format(self):
        with pytest.raises(EditLoanFormatError):
            parse_command("edit loan 1 d/desc r/10-10-2030 10:00", counts(loan=1))

    def test_edit_loan_bad_index(self):
        with pytest.raises(EditLoanIndexError):
            parse_command("edit loan x d/desc a/10 r/10-10-2030 10:00", counts(loan=1))


class TestHelpers:
    """Tests for the field and index helpers."""

    def test_extract_fields_uses_first_occurrence(self):
        """Test a marker repeated inside a later field does not move the split."""
        fields = extract_fields("d/ a a/ 5 d/ x", ("d/", "a/"), CommandFormatError)
        assert fields == ("a", "5 d/ x")

    def test_extract_fields_default_order_error(self):
        with pytest.raises(CommandFormatError):
            extract_fields("a/1 d/x", ("d/", "a/"), CommandFormatError)

    def test_parse_index_accepts_surrounding_spaces(self):
        assert parse_index("  2 ", 2, IndexOutOfRangeError) == 1

    def test_parse_index_rejects_count_plus_one(self):
        with pytest.raises(IndexOutOfRangeError):
            parse_index("3", 2, IndexOutOfRangeError)

    def test_error_messages_show_expected_syntax(self):
        with pytest.raises(AddLoanFormatError) as exc_info:
            parse_command("add loan", counts())
        assert "add loan d/<DESCRIPTION> a/<AMOUNT_LOANED> r/<LOAN_RETURN_DATE_AND_TIME>" in str(
            exc_info.value
        )
