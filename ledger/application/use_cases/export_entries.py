"""Use case exporting entries to a CSV file."""

from pathlib import Path

from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.domain.services import validate_month_range, validate_year_month
from ledger.infrastructure.logging.logger import get_app_logger


class ExportEntriesUseCase:
    """Write all entries, or those of a period, to a CSV file."""

    def __init__(
        self,
        repository: EntryRepositoryPort,
        writer,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing entry storage.
            writer: Callable ``(destination, entries) -> int`` that stores the
                entries and returns how many were written.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._writer = writer

    def execute(
        self,
        destination: Path | str,
        start_month: str | None = None,
        end_month: str | None = None,
    ) -> int:
        """Export entries and return the number of rows written.

        Args:
            destination: CSV file to create or overwrite.
            start_month: Optional first month (alone, a single month).
            end_month: Optional last month; requires ``start_month``.

        Returns:
            int: Number of exported entries.
        """
        if start_month is None and end_month is None:
            entries = self._repository.list_entries()
        elif end_month is None:
            month = validate_year_month(start_month)
            entries = self._repository.entries_in_month(month)
        else:
            start, end = validate_month_range(start_month, end_month)
            entries = self._repository.entries_in_range(start, end)
        count = self._writer(destination, entries)
        self._logger.info(f"Exported {count} entries to {destination}")
        return count


__all__ = ["ExportEntriesUseCase"]
