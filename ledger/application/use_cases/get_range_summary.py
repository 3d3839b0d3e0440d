"""Use case computing income, expense and balance over a month range."""

from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.domain.models import RangeSummary
from ledger.domain.services import validate_month_range
from ledger.infrastructure.logging.logger import get_app_logger


class GetRangeSummaryUseCase:
    """Summarize an inclusive range of months."""

    def __init__(self, repository: EntryRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, start_month: str, end_month: str) -> RangeSummary:
        """Return totals for every month from ``start_month`` to ``end_month``.

        Raises:
            InvalidMonthError: If either bound is not YYYY-MM.
            InvalidRangeError: If ``end_month`` precedes ``start_month``.
        """
        start, end = validate_month_range(start_month, end_month)
        totals = self._repository.fetch_kind_totals(start, end)
        summary = RangeSummary(
            start_month=start,
            end_month=end,
            income=totals.income,
            expense=totals.expense,
        )
        self._logger.info(
            f"Range summary {start}..{end}: income={summary.income}, "
            f"expense={summary.expense}, balance={summary.balance}"
        )
        return summary


__all__ = ["GetRangeSummaryUseCase", "RangeSummary"]
