"""Domain models for derived ledger aggregates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthSummary:
    """Income and expense totals for one calendar month.

    Attributes:
        month: Year-month identifier (YYYY-MM).
        income: Sum of income amounts.
        expense: Sum of expense amounts.
    """

    month: str
    income: int
    expense: int

    @property
    def balance(self) -> int:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class RangeSummary:
    """Income and expense totals over an inclusive month range."""

    start_month: str
    end_month: str
    income: int
    expense: int

    @property
    def balance(self) -> int:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryTotal:
    """Total amount for one category of a single kind within a period."""

    category: str
    total: int


@dataclass(frozen=True)
class KindTotals:
    """Raw income/expense sums returned by the store."""

    income: int
    expense: int


__all__ = ["MonthSummary", "RangeSummary", "CategoryTotal", "KindTotals"]
