"""Domain validation helpers for caller-supplied entry fields."""

from ledger.domain.constants import MAX_STORED_INTEGER
from ledger.domain.errors import InvalidAmountError, InvalidCategoryError


def validate_amount(amount) -> int:
    """Return the amount when it is a strictly positive integer.

    Args:
        amount: Candidate amount in the smallest currency unit.

    Returns:
        int: The validated amount.

    Raises:
        InvalidAmountError: If the amount is not a positive int within the
            64-bit range the store can hold.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmountError(f"Amount must be an integer: {amount!r}")
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive: {amount}")
    if amount > MAX_STORED_INTEGER:
        raise InvalidAmountError(f"Amount is too large: {amount}")
    return amount


def validate_category(category) -> str:
    """Return the category unchanged when it is a non-blank string.

    Raises:
        InvalidCategoryError: If the category is missing or blank.
    """
    if not isinstance(category, str) or not category.strip():
        raise InvalidCategoryError("Category must not be empty")
    return category


def normalize_note(note: str | None) -> str | None:
    """Map blank notes to None so absent and empty notes look the same."""
    if note is None:
        return None
    return note if note.strip() else None


__all__ = ["validate_amount", "validate_category", "normalize_note"]
