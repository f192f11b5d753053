"""Tests for CLI command handlers."""

import json
import logging

import pytest

from cli.__main__ import build_parser
from cli.formatting import format_currency, month_label, parse_position


@pytest.fixture
def cli(services):
    """Parse arguments and run the handler against the test services."""
    services.ledger.open_month("2024-01")

    def run(*argv):
        args = build_parser().parse_args(list(argv))
        args.func(args, services)
        return services

    return run


@pytest.fixture(autouse=True)
def capture_logs(caplog):
    caplog.set_level(logging.INFO, logger="budgetbook")
    return caplog


class TestFormatting:
    """Tests for CLI display helpers."""

    @pytest.mark.parametrize(
        "amount, expected",
        [(1184, "$1,184.00"), ("12.5", "$12.50"), (-1184, "-$1,184.00"), (None, "$0.00")],
    )
    def test_format_currency(self, amount, expected):
        assert format_currency(amount) == expected

    def test_month_label(self):
        assert month_label("2024-01") == "January 2024"

    def test_parse_position(self):
        assert parse_position(1, 3) == 0
        with pytest.raises(ValueError):
            parse_position(4, 3)


class TestTransactionCommands:
    """Tests for the transactions command group."""

    def test_add_and_list(self, cli, capture_logs):
        services = cli(
            "transactions", "add", "--category", "Rent", "--amount", "1184",
            "--date", "2024-01-05",
        )

        assert services.ledger.totals().total_expenses == 1184

        cli("transactions", "list", "--type", "expense")
        assert "Rent" in capture_logs.text

    def test_add_invalid_exits(self, cli):
        with pytest.raises(SystemExit):
            cli("transactions", "add", "--category", "Rent", "--amount", "abc")

    def test_add_unknown_category_warns(self, cli, capture_logs):
        cli("transactions", "add", "--category", "Boat", "--amount", "5")

        assert "not a current expense category" in capture_logs.text

    def test_delete_missing_exits(self, cli):
        with pytest.raises(SystemExit):
            cli("transactions", "delete", "42")


class TestCategoryCommands:
    """Tests for the categories command group."""

    def test_rename_and_set_budget(self, cli):
        services = cli("categories", "rename", "expenses", "1", "Food")
        cli("categories", "set-budget", "expenses", "1", "325")

        first = services.ledger.state.expenses[0]
        assert first.name == "Food"
        assert first.budget == 325

    def test_rename_warns_about_left_behind_transactions(self, cli, capture_logs):
        cli("transactions", "add", "--category", "Rent", "--amount", "1184")
        cli("categories", "rename", "expenses", "2", "Housing")

        assert "1 transaction(s) still use 'Rent'" in capture_logs.text

    def test_rename_without_orphans_does_not_warn(self, cli, capture_logs):
        """Test that no warning is given while the old name is still a live category."""
        cli("transactions", "add", "--category", "Rent", "--amount", "1184")
        cli("categories", "rename", "expenses", "2", "Rent")

        assert "still use" not in capture_logs.text

    def test_rename_ignores_other_type(self, cli, capture_logs):
        """Test that income transactions do not count toward an expense rename."""
        cli("transactions", "add", "--type", "income", "--category", "Rent", "--amount", "5")
        cli("categories", "rename", "expenses", "2", "Housing")

        assert "still use" not in capture_logs.text

    def test_delete_with_yes(self, cli):
        services = cli("categories", "delete", "income", "1", "--yes")

        assert [c.name for c in services.ledger.state.income][0] == "Intramurals"

    def test_invalid_position_exits(self, cli):
        with pytest.raises(SystemExit):
            cli("categories", "rename", "income", "99", "X")


class TestQuickAddCommands:
    """Tests for the quick-adds command group."""

    def test_create_and_apply(self, cli):
        cli("quick-adds", "create", "--category", "Gas", "--amount", "45")
        services = cli("quick-adds", "apply", "expense", "1")

        assert services.ledger.state.transactions[0].category == "Gas"
        assert services.ledger.state.expenses == services.ledger.load_month("2024-01").expenses


class TestMonthCommands:
    """Tests for the month command group."""

    def test_balance_and_show(self, cli, capture_logs):
        cli("month", "balance", "500")
        cli("month", "show")

        assert "Monthly Budget - January 2024" in capture_logs.text
        assert "$500.00" in capture_logs.text

    def test_next_and_prev(self, cli):
        services = cli("month", "next")
        assert services.ledger.current_month == "2024-02"

        cli("month", "prev")
        cli("month", "prev")
        assert services.ledger.current_month == "2023-12"

    def test_export_then_import(self, cli, tmp_path):
        cli("month", "balance", "250")
        services = cli("month", "export", "--output", str(tmp_path))

        exported = tmp_path / "2024-01-budget.json"
        assert json.loads(exported.read_text())["beginningBalance"] == 250.0

        cli("month", "balance", "0")
        cli("month", "import", str(exported))
        assert services.ledger.state.beginning_balance == 250

    def test_import_invalid_file_exits(self, cli, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{nope")

        with pytest.raises(SystemExit):
            cli("month", "import", str(bad))
