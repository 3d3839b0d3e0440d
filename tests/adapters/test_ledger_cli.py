"""Tests for the ledger command-line adapter."""

from unittest.mock import MagicMock

import pytest

from ledger.adapters import ledger_cli
from ledger.domain.errors import StorageError
from ledger.domain.services import current_year_month


@pytest.fixture
def run(tmp_path, capsys):
    db_path = tmp_path / "cli.db"

    def _run(*argv: str):
        code = ledger_cli.main(["--db", str(db_path), *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


def test_add_list_and_month_report(run) -> None:
    """Entries added from the CLI show up in list and month report."""
    assert run("add", "expense", "1200", "food", "team", "lunch")[0] == 0
    assert run("add", "income", "5000", "salary")[0] == 0

    code, out, _ = run("list")
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 2
    assert "Income 5000 salary" in lines[0]
    assert lines[0].endswith("[2]")
    assert "Expense 1200 food team lunch [1]" in lines[1]

    code, out, _ = run("report", "month")
    assert code == 0
    assert out.splitlines() == [
        f"== Summary {current_year_month()} ==",
        "Income : 5000",
        "Expense: 1200",
        "Balance: 3800",
    ]


def test_category_report_both_kinds(run) -> None:
    run("add", "expense", "500", "food")
    run("add", "expense", "300", "food")
    run("add", "expense", "800", "rent")
    month = current_year_month()

    code, out, _ = run("report", "category", month, "--both")

    assert code == 0
    assert out.splitlines() == [
        f"== Category Totals (Expense) {month} ==",
        f"{'food':12} 800",
        f"{'rent':12} 800",
        "",
        f"== Category Totals (Income) {month} ==",
        "(no data)",
    ]


def test_range_report_and_export(run, tmp_path) -> None:
    run("add", "income", "100", "gift")
    month = current_year_month()

    code, out, _ = run("report", "range", month, month)
    assert code == 0
    assert "Balance: 100" in out

    destination = tmp_path / "out.csv"
    code, out, _ = run("export", str(destination), "--month", month)
    assert code == 0
    assert "Exported 1 entries" in out
    assert destination.read_text(encoding="utf-8").splitlines()[0] == (
        "id,kind,amount,category,note,created_at"
    )


def test_delete_reports_missing_id(run) -> None:
    run("add", "expense", "10", "snacks")

    assert run("delete", "1")[1].strip() == "Entry deleted successfully."
    assert run("delete", "1")[1].strip() == "No entry found with ID: 1"


def test_delete_huge_id_reports_missing(run) -> None:
    code, out, _ = run("delete", "99999999999999999999")

    assert code == ledger_cli.EXIT_OK
    assert out.strip() == "No entry found with ID: 99999999999999999999"


@pytest.mark.parametrize(
    "argv",
    [
        ("add", "gift", "100", "misc"),
        ("add", "expense", "abc", "food"),
        ("add", "expense", "-5", "food"),
        ("add", "expense", "99999999999999999999", "food"),
        ("report", "range", "2024-03", "2024-01"),
        ("report", "month", "March"),
        ("list", "--month", "2024-02", "--from", "2024-01"),
        ("export", "out.csv", "--month", "2024-02", "--to", "2024-03"),
    ],
)
def test_invalid_input_exits_with_code_one(run, argv) -> None:
    code, out, err = run(*argv)

    assert code == ledger_cli.EXIT_INVALID_INPUT
    assert err
    assert run("list")[1] == ""


def test_storage_failure_exits_with_code_two(monkeypatch, capsys) -> None:
    repository = MagicMock()
    repository.initialize.side_effect = StorageError("disk full")
    monkeypatch.setattr(
        ledger_cli,
        "build_entry_repository",
        lambda db_port: repository,
    )
    fake_logger = MagicMock()
    monkeypatch.setattr(ledger_cli, "get_app_logger", lambda: fake_logger)

    code = ledger_cli.main(["--db", "unused.db", "list"])

    assert code == ledger_cli.EXIT_STORAGE_FAILURE
    assert "disk full" in capsys.readouterr().err
    fake_logger.error.assert_called_once()


def test_settings_come_from_environment_without_db_flag(
    monkeypatch,
    tmp_path,
) -> None:
    monkeypatch.setenv("LEDGER_DB_PATH", str(tmp_path / "env.db"))

    assert ledger_cli.main(["add", "income", "1", "tip"]) == 0
    assert (tmp_path / "env.db").exists()
