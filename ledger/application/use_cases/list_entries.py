"""Use case listing stored entries."""

from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.domain.models import Entry
from ledger.domain.services import validate_month_range, validate_year_month
from ledger.infrastructure.logging.logger import get_app_logger


class ListEntriesUseCase:
    """Read entries, most recent first, optionally limited to a period."""

    def __init__(self, repository: EntryRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[Entry]:
        """Return every entry in the store."""
        entries = self._repository.list_entries()
        self._logger.info(f"Listed {len(entries)} entries")
        return entries

    def execute_month(self, year_month: str) -> list[Entry]:
        """Return entries created during ``year_month`` (YYYY-MM)."""
        month = validate_year_month(year_month)
        entries = self._repository.entries_in_month(month)
        self._logger.info(f"Listed {len(entries)} entries for {month}")
        return entries

    def execute_range(self, start_month: str, end_month: str) -> list[Entry]:
        """Return entries created within the inclusive month range."""
        start, end = validate_month_range(start_month, end_month)
        entries = self._repository.entries_in_range(start, end)
        self._logger.info(
            f"Listed {len(entries)} entries for {start}..{end}"
        )
        return entries


__all__ = ["ListEntriesUseCase"]
