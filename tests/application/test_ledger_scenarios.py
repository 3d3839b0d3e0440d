"""End-to-end ledger scenarios against a real SQLite store."""

import csv

import pytest

from ledger.application.use_cases import (
    AddEntryUseCase,
    DeleteEntryUseCase,
    ExportEntriesUseCase,
    GetCategoryTotalsUseCase,
    GetMonthSummaryUseCase,
    GetRangeSummaryUseCase,
    InitializeStoreUseCase,
    ListEntriesUseCase,
)
from ledger.domain.errors import InvalidAmountError
from ledger.domain.models import CategoryTotal, EntryKind
from ledger.domain.services import current_year_month
from ledger.infrastructure.csv_export import write_entries_csv
from ledger.infrastructure.entry_repository import SqlAlchemyEntryRepository


@pytest.fixture
def add(repository):
    return AddEntryUseCase(repository).execute


def test_lunch_and_salary_month_summary(db_adapter) -> None:
    """Expense 1200 and income 5000 leave a 3800 balance this month."""
    repository = SqlAlchemyEntryRepository(db_adapter)
    InitializeStoreUseCase(repository).execute()
    add = AddEntryUseCase(repository).execute

    add("expense", 1200, "food", "lunch")
    add("income", 5000, "salary")

    summary = GetMonthSummaryUseCase(repository).execute(current_year_month())
    assert (summary.income, summary.expense, summary.balance) == (
        5000,
        1200,
        3800,
    )


def test_add_then_list_shows_one_new_entry(repository, add) -> None:
    before = ListEntriesUseCase(repository).execute()

    entry = add(EntryKind.INCOME, 750, "refund")

    after = ListEntriesUseCase(repository).execute()
    assert len(after) == len(before) + 1
    assert [e for e in after if e.id == entry.id] == [entry]
    assert entry.id not in {e.id for e in before}


def test_rejected_amount_persists_nothing(repository, add) -> None:
    with pytest.raises(InvalidAmountError):
        add("expense", 0, "food")

    assert ListEntriesUseCase(repository).execute() == []


def test_income_raises_month_income_only(repository, add, clock) -> None:
    clock.set(2024, 6, 10, 9, 0, 0)
    add("expense", 300, "food")
    summary = GetMonthSummaryUseCase(repository)
    before = summary.execute("2024-06")

    add("income", 4200, "salary")

    after = summary.execute("2024-06")
    assert after.income == before.income + 4200
    assert after.expense == before.expense
    assert after.income - after.expense == after.balance


def test_month_without_entries_is_all_zero(repository) -> None:
    summary = GetMonthSummaryUseCase(repository).execute("1999-01")

    assert (summary.income, summary.expense, summary.balance) == (0, 0, 0)


def test_equal_category_totals_sort_by_name(repository, add, clock) -> None:
    """food 500+300 ties rent 800, so food comes first."""
    clock.set(2024, 2, 3, 18, 0, 0)
    add("expense", 500, "food")
    add("expense", 300, "food")
    add("expense", 800, "rent")

    rows = GetCategoryTotalsUseCase(repository).execute("2024-02", "expense")

    assert rows == [
        CategoryTotal(category="food", total=800),
        CategoryTotal(category="rent", total=800),
    ]
    assert GetCategoryTotalsUseCase(repository).execute(
        "2024-02",
        "income",
    ) == []


def test_range_summary_is_inclusive_of_both_ends(
    repository,
    add,
    clock,
) -> None:
    clock.set(2023, 12, 31, 23, 59, 59)
    add("income", 1, "december")
    clock.set(2024, 1, 1, 0, 0, 0)
    add("income", 10, "january")
    clock.set(2024, 2, 29, 12, 0, 0)
    add("expense", 100, "february")
    clock.set(2024, 3, 31, 23, 59, 59)
    add("income", 1000, "march")
    clock.set(2024, 4, 1, 0, 0, 0)
    add("expense", 10000, "april")

    summary = GetRangeSummaryUseCase(repository).execute("2024-01", "2024-03")
    totals = GetCategoryTotalsUseCase(repository).execute_range(
        "2024-01",
        "2024-03",
        EntryKind.INCOME,
    )

    assert (summary.income, summary.expense, summary.balance) == (
        1010,
        100,
        910,
    )
    assert [row.category for row in totals] == ["march", "january"]


def test_delete_then_export(repository, add, tmp_path) -> None:
    kept = add("income", 5000, "salary")
    removed = add("expense", 1200, "food", "lunch")
    delete = DeleteEntryUseCase(repository)

    assert delete.execute(removed.id) == 1
    assert delete.execute(removed.id) == 0

    destination = tmp_path / "export.csv"
    export = ExportEntriesUseCase(repository, writer=write_entries_csv)
    count = export.execute(destination)

    assert count == 1
    with destination.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert rows == [
        {
            "id": str(kept.id),
            "kind": "income",
            "amount": "5000",
            "category": "salary",
            "note": "",
            "created_at": kept.created_at,
        }
    ]
