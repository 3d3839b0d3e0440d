"""Domain package for ledger rules and core models."""

from .constants import CREATED_AT_FORMAT, EXPORT_COLUMNS, YEAR_MONTH_FORMAT
from .errors import (
    InvalidAmountError,
    InvalidCategoryError,
    InvalidKindError,
    InvalidMonthError,
    InvalidRangeError,
    LedgerError,
    LedgerValidationError,
    StorageError,
)
from .models import (
    CategoryTotal,
    Entry,
    EntryKind,
    KindTotals,
    MonthSummary,
    RangeSummary,
)
from .services import (
    current_year_month,
    entry_to_record,
    normalize_note,
    validate_amount,
    validate_category,
    validate_month_range,
    validate_year_month,
)

__all__ = [
    "CREATED_AT_FORMAT",
    "EXPORT_COLUMNS",
    "YEAR_MONTH_FORMAT",
    "LedgerError",
    "LedgerValidationError",
    "InvalidAmountError",
    "InvalidCategoryError",
    "InvalidKindError",
    "InvalidMonthError",
    "InvalidRangeError",
    "StorageError",
    "Entry",
    "EntryKind",
    "MonthSummary",
    "RangeSummary",
    "CategoryTotal",
    "KindTotals",
    "current_year_month",
    "entry_to_record",
    "normalize_note",
    "validate_amount",
    "validate_category",
    "validate_month_range",
    "validate_year_month",
]
