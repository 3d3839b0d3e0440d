"""Port for durable storage of ledger entries."""

from typing import Protocol

from ledger.domain.models import CategoryTotal, Entry, EntryKind, KindTotals


class EntryRepositoryPort(Protocol):
    """Port exposing create, list, delete and aggregate reads over entries.

    Implementations own id and timestamp assignment and enforce the entry
    invariants at write time.
    """

    def initialize(self) -> None:
        """Create the entry schema if it does not exist yet."""

    def add(
        self,
        kind: EntryKind,
        amount: int,
        category: str,
        note: str | None = None,
    ) -> Entry:
        """Persist a new entry and return it with its id and timestamp."""

    def list_entries(self) -> list[Entry]:
        """Return every entry, most recent first."""

    def delete(self, entry_id: int) -> int:
        """Remove an entry by id and return the number of rows removed."""

    def entries_in_month(self, year_month: str) -> list[Entry]:
        """Return entries created during one month, most recent first."""

    def entries_in_range(
        self,
        start_month: str,
        end_month: str,
    ) -> list[Entry]:
        """Return entries created within an inclusive month range."""

    def fetch_kind_totals(
        self,
        start_month: str,
        end_month: str,
    ) -> KindTotals:
        """Return income and expense sums over an inclusive month range."""

    def fetch_category_totals(
        self,
        start_month: str,
        end_month: str,
        kind: EntryKind,
    ) -> list[CategoryTotal]:
        """Return per-category sums for one kind.

        Rows are ordered by total descending, then category ascending.
        """


__all__ = ["EntryRepositoryPort"]
