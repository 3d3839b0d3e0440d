"""Tests for the AddEntryUseCase."""

from unittest.mock import MagicMock

import pytest

from ledger.application.use_cases.add_entry import AddEntryUseCase
from ledger.domain.errors import (
    InvalidAmountError,
    InvalidCategoryError,
    InvalidKindError,
)
from ledger.domain.models import Entry, EntryKind


def _stored_entry() -> Entry:
    return Entry(
        id=1,
        kind=EntryKind.EXPENSE,
        amount=1200,
        category="food",
        note="lunch",
        created_at="2024-02-15 12:00:00",
    )


def test_execute_parses_kind_and_forwards_fields() -> None:
    """Text kinds are parsed at the boundary before reaching the store."""
    repository = MagicMock()
    repository.add.return_value = _stored_entry()

    use_case = AddEntryUseCase(repository, logger=MagicMock())
    result = use_case.execute("expense", 1200, "food", "lunch")

    assert result == _stored_entry()
    repository.add.assert_called_once_with(
        EntryKind.EXPENSE,
        1200,
        "food",
        "lunch",
    )


def test_execute_stores_blank_note_as_none() -> None:
    repository = MagicMock()

    AddEntryUseCase(repository, logger=MagicMock()).execute(
        EntryKind.INCOME,
        5000,
        "salary",
        "   ",
    )

    repository.add.assert_called_once_with(
        EntryKind.INCOME,
        5000,
        "salary",
        None,
    )


@pytest.mark.parametrize(
    ("kind", "amount", "category", "error"),
    [
        ("gift", 100, "misc", InvalidKindError),
        ("expense", 0, "food", InvalidAmountError),
        ("income", -10, "salary", InvalidAmountError),
        ("expense", 100, "", InvalidCategoryError),
    ],
)
def test_execute_rejects_invalid_input_before_writing(
    kind,
    amount,
    category,
    error,
) -> None:
    """Validation failures never reach the repository."""
    repository = MagicMock()

    with pytest.raises(error):
        AddEntryUseCase(repository, logger=MagicMock()).execute(
            kind,
            amount,
            category,
        )

    repository.add.assert_not_called()
