"""Domain constants for the ledger."""

CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"

YEAR_MONTH_FORMAT = "%Y-%m"

# Largest value a SQLite INTEGER column can hold.
MAX_STORED_INTEGER = 2**63 - 1

EXPORT_COLUMNS = (
    "id",
    "kind",
    "amount",
    "category",
    "note",
    "created_at",
)


__all__ = [
    "CREATED_AT_FORMAT",
    "YEAR_MONTH_FORMAT",
    "MAX_STORED_INTEGER",
    "EXPORT_COLUMNS",
]
