"""End-to-end tests driving the finsight command through its stdin."""

from finsight.cli.main import cli


def run(cli_runner, data_dir, text):
    return cli_runner.invoke(cli, ["--data-dir", str(data_dir)], input=text)


def test_session_greets_and_says_goodbye(cli_runner, data_dir):
    result = run(cli_runner, data_dir, "bye\n")

    assert result.exit_code == 0
    assert "Welcome to FinSight, what can I do for you?" in result.output
    assert "Goodbye, see you again!" in result.output


def test_records_persist_between_sessions(cli_runner, data_dir):
    """Test data typed in one session is listed in the next."""
    result = run(cli_runner, data_dir, "add income d/salary a/3000\nadd expense d/rent a/1200\nbye\n")
    assert result.exit_code == 0

    result = run(cli_runner, data_dir, "list income\nlist income overview\nbye\n")

    assert result.exit_code == 0
    assert "Description: salary" in result.output
    assert "Remaining Income: $1,800.00" in result.output
    assert (data_dir / "income.txt").read_text(encoding="utf-8") == "salary|3000\n"
    assert (data_dir / "expense.txt").read_text(encoding="utf-8") == "rent|1200\n"


def test_all_data_files_are_created(cli_runner, data_dir):
    run(cli_runner, data_dir, "bye\n")

    for name in ("loan.txt", "income.txt", "expense.txt", "invest.txt"):
        assert (data_dir / name).exists()


def test_end_of_input_without_bye(cli_runner, data_dir):
    result = run(cli_runner, data_dir, "add expense d/bus a/2")

    assert result.exit_code == 0
    assert "Goodbye, see you again!" in result.output
    assert (data_dir / "expense.txt").read_text(encoding="utf-8") == "bus|2\n"


def test_errors_do_not_end_session(cli_runner, data_dir):
    result = run(
        cli_runner,
        data_dir,
        "add loan d/car\ndelete income 4\nadd loan d/car a/10 r/10-10-2126 19:00\nbye\n",
    )

    assert result.exit_code == 0
    assert "Add Loan Command is in the wrong format" in result.output
    assert "Delete Income index is invalid or does not exist" in result.output
    assert "Added Loan:" in result.output
    assert (data_dir / "loan.txt").read_text(encoding="utf-8") == "0|car|10|10-10-2126 19:00\n"


def test_corrupted_file_starts_empty(cli_runner, data_dir):
    """Test a corrupted file is reported and its collection starts empty."""
    data_dir.mkdir()
    (data_dir / "invest.txt").write_text("fund|100|6|40\n", encoding="utf-8")

    result = run(cli_runner, data_dir, "list investment\nbye\n")

    assert result.exit_code == 0
    assert "corrupted day of investment [40]" in result.output
    assert "Please rectify the data in invest.txt file and restart the program." in result.output
    assert "No investments found." in result.output


def test_data_dir_from_environment(cli_runner, data_dir):
    result = cli_runner.invoke(
        cli, [], input="add income d/gift a/5\nbye\n", env={"FINSIGHT_DATA_DIR": str(data_dir)}
    )

    assert result.exit_code == 0
    assert (data_dir / "income.txt").read_text(encoding="utf-8") == "gift|5\n"
