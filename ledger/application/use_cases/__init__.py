"""Application use cases package."""

from .add_entry import AddEntryUseCase
from .delete_entry import DeleteEntryUseCase
from .export_entries import ExportEntriesUseCase
from .get_category_totals import CategoryTotal, GetCategoryTotalsUseCase
from .get_month_summary import GetMonthSummaryUseCase, MonthSummary
from .get_range_summary import GetRangeSummaryUseCase, RangeSummary
from .initialize_store import InitializeStoreUseCase
from .list_entries import ListEntriesUseCase

__all__ = [
    "AddEntryUseCase",
    "DeleteEntryUseCase",
    "ExportEntriesUseCase",
    "GetCategoryTotalsUseCase",
    "CategoryTotal",
    "GetMonthSummaryUseCase",
    "MonthSummary",
    "GetRangeSummaryUseCase",
    "RangeSummary",
    "InitializeStoreUseCase",
    "ListEntriesUseCase",
]
