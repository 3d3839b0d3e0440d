"""Error types raised by the ledger core."""


class LedgerError(Exception):
    """Base class for every ledger failure."""


class LedgerValidationError(LedgerError, ValueError):
    """Raised when caller-supplied data is rejected before any write."""


class InvalidAmountError(LedgerValidationError):
    """Raised when an amount is not a strictly positive integer."""


class InvalidCategoryError(LedgerValidationError):
    """Raised when a category label is empty."""


class InvalidKindError(LedgerValidationError):
    """Raised when a kind is neither expense nor income."""


class InvalidMonthError(LedgerValidationError):
    """Raised when a year-month is not in zero-padded YYYY-MM form."""


class InvalidRangeError(LedgerValidationError):
    """Raised when a month range ends before it starts."""


class StorageError(LedgerError):
    """Raised when the persistence layer fails (I/O, schema, corruption)."""


__all__ = [
    "LedgerError",
    "LedgerValidationError",
    "InvalidAmountError",
    "InvalidCategoryError",
    "InvalidKindError",
    "InvalidMonthError",
    "InvalidRangeError",
    "StorageError",
]
