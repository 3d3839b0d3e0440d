"""Use case breaking a period's entries down by category."""

from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.domain.models import CategoryTotal, EntryKind
from ledger.domain.services import validate_month_range, validate_year_month
from ledger.infrastructure.logging.logger import get_app_logger


class GetCategoryTotalsUseCase:
    """Sum amounts per category for one kind within a month or range.

    Rows come back largest total first; equal totals are ordered by
    category name.
    """

    def __init__(self, repository: EntryRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing entry aggregates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        year_month: str,
        kind: EntryKind | str = EntryKind.EXPENSE,
    ) -> list[CategoryTotal]:
        """Return category totals for a single month.

        Args:
            year_month: Month to break down, as YYYY-MM.
            kind: Kind of entries to include.

        Returns:
            list[CategoryTotal]: One row per category; empty when no match.
        """
        month = validate_year_month(year_month)
        return self._fetch(month, month, EntryKind.parse(kind))

    def execute_range(
        self,
        start_month: str,
        end_month: str,
        kind: EntryKind | str = EntryKind.EXPENSE,
    ) -> list[CategoryTotal]:
        """Return category totals over an inclusive month range."""
        start, end = validate_month_range(start_month, end_month)
        return self._fetch(start, end, EntryKind.parse(kind))

    def _fetch(
        self,
        start: str,
        end: str,
        kind: EntryKind,
    ) -> list[CategoryTotal]:
        rows = self._repository.fetch_category_totals(start, end, kind)
        self._logger.info(
            f"Fetched {len(rows)} {kind.label} categories "
            f"for {start}..{end}"
        )
        return rows


__all__ = ["GetCategoryTotalsUseCase", "CategoryTotal"]
