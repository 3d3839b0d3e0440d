"""Shaping of entries into flat export records."""

from ledger.domain.constants import EXPORT_COLUMNS
from ledger.domain.models import Entry


def entry_to_record(entry: Entry) -> dict[str, object]:
    """Flatten an entry for CSV export.

    Args:
        entry: Persisted entry.

    Returns:
        dict[str, object]: Values keyed by ``EXPORT_COLUMNS``; the kind is
        its text label and a missing note becomes an empty string.
    """
    record = {
        "id": entry.id,
        "kind": entry.kind.label,
        "amount": entry.amount,
        "category": entry.category,
        "note": entry.note if entry.note is not None else "",
        "created_at": entry.created_at,
    }
    return {column: record[column] for column in EXPORT_COLUMNS}


__all__ = ["entry_to_record"]
