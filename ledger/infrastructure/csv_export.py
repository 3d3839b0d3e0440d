"""CSV file writer for exported ledger entries."""

import csv
from collections.abc import Iterable
from pathlib import Path

from ledger.domain.constants import EXPORT_COLUMNS
from ledger.domain.models import Entry
from ledger.domain.services import entry_to_record


def write_entries_csv(
    destination: Path | str,
    entries: Iterable[Entry],
) -> int:
    """Write entries to a CSV file with a header row.

    Args:
        destination: Target file path; parent directories are created.
        entries: Entries to serialize, in output order.

    Returns:
        int: Number of data rows written.
    """
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(EXPORT_COLUMNS))
        writer.writeheader()
        for entry in entries:
            writer.writerow(entry_to_record(entry))
            count += 1
    return count


__all__ = ["write_entries_csv"]
