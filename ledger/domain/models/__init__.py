"""Domain models package."""

from .entry import Entry, EntryKind
from .summaries import CategoryTotal, KindTotals, MonthSummary, RangeSummary

__all__ = [
    "Entry",
    "EntryKind",
    "MonthSummary",
    "RangeSummary",
    "CategoryTotal",
    "KindTotals",
]
