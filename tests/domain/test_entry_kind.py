"""Tests for the EntryKind discriminant."""

import pytest

from ledger.domain.errors import InvalidKindError, StorageError
from ledger.domain.models import EntryKind


def test_kind_codes_round_trip_both_variants() -> None:
    """Expense maps to 0 and income to 1, in both directions."""
    assert EntryKind.EXPENSE.to_code() == 0
    assert EntryKind.INCOME.to_code() == 1
    assert EntryKind.from_code(0) is EntryKind.EXPENSE
    assert EntryKind.from_code(1) is EntryKind.INCOME


def test_from_code_rejects_unknown_discriminant() -> None:
    """Values outside {0, 1} can only come from a corrupted store."""
    with pytest.raises(StorageError):
        EntryKind.from_code(2)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("expense", EntryKind.EXPENSE),
        ("Income", EntryKind.INCOME),
        ("  EXPENSE ", EntryKind.EXPENSE),
        (EntryKind.INCOME, EntryKind.INCOME),
    ],
)
def test_parse_accepts_labels_and_members(raw, expected) -> None:
    assert EntryKind.parse(raw) is expected


@pytest.mark.parametrize("raw", ["", "refund", None, 1])
def test_parse_rejects_other_values(raw) -> None:
    """Anything but the two labels is an invalid kind."""
    with pytest.raises(InvalidKindError):
        EntryKind.parse(raw)


def test_kind_labels_match_member_values() -> None:
    assert EntryKind.INCOME.label == "income"
    assert EntryKind.EXPENSE.label == "expense"
