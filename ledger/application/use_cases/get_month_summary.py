"""Use case computing income, expense and balance for one month."""

from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.domain.models import MonthSummary
from ledger.domain.services import validate_year_month
from ledger.infrastructure.logging.logger import get_app_logger


class GetMonthSummaryUseCase:
    """Summarize a single month from the persisted entries."""

    def __init__(self, repository: EntryRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing entry aggregates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, year_month: str) -> MonthSummary:
        """Return the month summary.

        Args:
            year_month: Month to summarize, as YYYY-MM.

        Returns:
            MonthSummary: Totals for the month; zeros when it has no entries.
        """
        month = validate_year_month(year_month)
        totals = self._repository.fetch_kind_totals(month, month)
        summary = MonthSummary(
            month=month,
            income=totals.income,
            expense=totals.expense,
        )
        self._logger.info(
            f"Month summary {month}: income={summary.income}, "
            f"expense={summary.expense}, balance={summary.balance}"
        )
        return summary


__all__ = ["GetMonthSummaryUseCase", "MonthSummary"]
