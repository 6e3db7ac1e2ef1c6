"""Tests for the budgetbook command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner, Result

from budgetbook.cli import app

runner = CliRunner()


@pytest.fixture
def ledger_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path / "purchases.txt"


def invoke(ledger_file: Path, *args: str, input: str | None = None) -> Result:
    return runner.invoke(app, ["--file", str(ledger_file), *args], input=input)


class TestLedgerCommands:
    """Tests for income, buy and balance."""

    def test_income_and_purchase(self, ledger_file: Path) -> None:
        """Should save income and purchases to the file."""
        assert invoke(ledger_file, "income", "100").exit_code == 0

        result = invoke(ledger_file, "buy", "food", "Lunch $9.994")
        assert result.exit_code == 0
        assert "Lunch $9.99" in result.output

        result = invoke(ledger_file, "balance")
        assert "Balance: $90.01" in result.output
        assert ledger_file.read_text(encoding="utf-8") == "Balance:90.01\nFOOD:Lunch $9.99\n"

    def test_insufficient_funds(self, ledger_file: Path) -> None:
        """Should refuse the purchase and keep the balance."""
        invoke(ledger_file, "income", "10")

        result = invoke(ledger_file, "buy", "4", "Gift $20")
        assert result.exit_code == 1
        assert "Not enough income" in result.output

        assert "Balance: $10.00" in invoke(ledger_file, "balance").output

    def test_malformed_entry(self, ledger_file: Path) -> None:
        """Should report malformed purchase text."""
        invoke(ledger_file, "income", "10")

        result = invoke(ledger_file, "buy", "food", "Lunch 5")
        assert result.exit_code == 1
        assert "Invalid purchase" in result.output

    def test_unknown_category(self, ledger_file: Path) -> None:
        """Should report unknown categories."""
        result = invoke(ledger_file, "buy", "snacks", "Chips $1")
        assert result.exit_code == 1
        assert "Unknown category" in result.output

    def test_invalid_income(self, ledger_file: Path) -> None:
        """Should reject non-numeric income."""
        result = invoke(ledger_file, "income", "lots")
        assert result.exit_code == 1
        assert not ledger_file.exists()

    def test_balance_without_file(self, ledger_file: Path) -> None:
        """Should start from an empty ledger when there is no file."""
        result = invoke(ledger_file, "balance")
        assert result.exit_code == 0
        assert "Balance: $0.00" in result.output


class TestLoadErrors:
    """Tests for malformed purchases files."""

    def test_strict_load_fails(self, ledger_file: Path) -> None:
        """Should exit with status 1 on a malformed line."""
        ledger_file.write_text("Balance:10.00\ngarbage\n", encoding="utf-8")

        result = invoke(ledger_file, "balance")
        assert result.exit_code == 1

    def test_lenient_load_skips(self, ledger_file: Path) -> None:
        """Should skip malformed lines with --lenient."""
        ledger_file.write_text("Balance:10.00\ngarbage\n", encoding="utf-8")

        result = runner.invoke(app, ["--file", str(ledger_file), "--lenient", "balance"])
        assert result.exit_code == 0
        assert "Balance: $10.00" in result.output


class TestReportCommands:
    """Tests for list and report."""

    def test_list_empty(self, ledger_file: Path) -> None:
        """Should say the list is empty."""
        assert "The purchase list is empty!" in invoke(ledger_file, "list").output

    def test_list_and_reports(self, ledger_file: Path) -> None:
        """Should list in recording order and report by price."""
        ledger_file.write_text(
            "Balance:50.00\nFOOD:Bread $2.50\nOTHER:Gift $20.00\nFOOD:Cheese $8.00\n",
            encoding="utf-8",
        )

        output = invoke(ledger_file, "list").output
        assert output.index("Bread $2.50") < output.index("Gift $20.00") < output.index("Cheese $8.00")
        assert "Total sum: $30.50" in output

        output = invoke(ledger_file, "report").output
        assert output.index("Gift $20.00") < output.index("Cheese $8.00") < output.index("Bread $2.50")

        output = invoke(ledger_file, "report", "--category", "food").output
        assert "Gift" not in output
        assert "Total sum: $10.50" in output

        output = invoke(ledger_file, "report", "--by-type").output
        assert output.index("Other") < output.index("Food")
        assert "Total sum: $30.50" in output

    def test_empty_category(self, ledger_file: Path) -> None:
        """Should say the list is empty for a category without purchases."""
        ledger_file.write_text("Balance:50.00\nFOOD:Bread $2.50\n", encoding="utf-8")

        assert "The purchase list is empty!" in invoke(ledger_file, "list", "clothes").output
        assert "The purchase list is empty!" in invoke(ledger_file, "report", "-c", "2").output


class TestMenu:
    """Tests for the interactive menu."""

    def test_session_save_and_load(self, ledger_file: Path) -> None:
        """Should add income and a purchase, save, then load in a new session."""
        session = "\n".join(["1", "100", "2", "1", "Lunch", "9.994", "5", "4", "5", "0"]) + "\n"

        result = invoke(ledger_file, "menu", input=session)
        assert result.exit_code == 0
        assert "Purchase was added!" in result.output
        assert "Balance: $90.01" in result.output
        assert "Purchases were saved!" in result.output

        result = invoke(ledger_file, "menu", input="6\n6\n4\n0\n")
        assert "Purchases were loaded!" in result.output
        assert "Balance: $180.02" in result.output
        assert "Bye!" in result.output

    def test_insufficient_funds_in_menu(self, ledger_file: Path) -> None:
        """Should report and continue after a rejected purchase."""
        session = "\n".join(["2", "4", "Gift", "20", "5", "0"]) + "\n"

        result = invoke(ledger_file, "menu", input=session)
        assert result.exit_code == 0
        assert "Not enough income to add this purchase: Gift $20" in result.output

    def test_nothing_to_save_or_load(self, ledger_file: Path) -> None:
        """Should not write an empty ledger and report a missing file."""
        result = invoke(ledger_file, "menu", input="5\n6\n0\n")

        assert "Nothing to save" in result.output
        assert "Nothing to load" in result.output
        assert not ledger_file.exists()

    def test_analyze(self, ledger_file: Path) -> None:
        """Should show sorted reports from the analyze menu."""
        ledger_file.write_text("Balance:50.00\nFOOD:Bread $2.50\nFOOD:Cheese $8.00\n", encoding="utf-8")
        session = "\n".join(["6", "7", "1", "3", "2", "4", "0"]) + "\n"

        result = invoke(ledger_file, "menu", input=session)
        assert result.exit_code == 0
        assert result.output.index("Cheese $8.00") < result.output.index("Bread $2.50")
        assert "The purchase list is empty!" in result.output

    def test_type_totals_on_empty_ledger(self, ledger_file: Path) -> None:
        """Should say the list is empty instead of showing zero totals."""
        result = invoke(ledger_file, "menu", input="7\n2\n4\n0\n")

        assert result.exit_code == 0
        assert "The purchase list is empty!" in result.output
        assert "Total sum" not in result.output


class TestOutOfRangeAmounts:
    """Tests for amounts too large to hold in cents."""

    def test_huge_income(self, ledger_file: Path) -> None:
        """Should report an invalid amount rather than crash."""
        result = invoke(ledger_file, "income", "9" * 30)

        assert result.exit_code == 1
        assert "Invalid amount" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_huge_purchase(self, ledger_file: Path) -> None:
        """Should report an invalid purchase rather than crash."""
        invoke(ledger_file, "income", "10")

        result = invoke(ledger_file, "buy", "food", "Yacht $1e30")

        assert result.exit_code == 1
        assert "Invalid purchase" in result.output

    def test_huge_balance_in_file(self, ledger_file: Path) -> None:
        """Should fail the load with a parse error message."""
        ledger_file.write_text("Balance:" + "9" * 30 + "\n", encoding="utf-8")

        result = invoke(ledger_file, "balance")

        assert result.exit_code == 1
        assert "Cannot load" in result.output
