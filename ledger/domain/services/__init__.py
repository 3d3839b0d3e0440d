"""Domain services package."""

from .periods import (
    current_year_month,
    validate_month_range,
    validate_year_month,
)
from .records import entry_to_record
from .validation import normalize_note, validate_amount, validate_category

__all__ = [
    "current_year_month",
    "validate_month_range",
    "validate_year_month",
    "entry_to_record",
    "normalize_note",
    "validate_amount",
    "validate_category",
]
