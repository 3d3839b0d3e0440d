"""Year-month helpers.

Year-months are zero-padded ``YYYY-MM`` strings, so comparing them as text
orders them chronologically. Every month accepted here is checked against
that exact shape.
"""

from datetime import datetime
import re

from ledger.domain.constants import YEAR_MONTH_FORMAT
from ledger.domain.errors import InvalidMonthError, InvalidRangeError


_YEAR_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def validate_year_month(value) -> str:
    """Return the value when it is a zero-padded ``YYYY-MM`` string.

    Raises:
        InvalidMonthError: If the value has any other shape.
    """
    if not isinstance(value, str) or not _YEAR_MONTH_RE.match(value):
        raise InvalidMonthError(
            f"Invalid month: {value!r}. Expected format YYYY-MM."
        )
    return value


def validate_month_range(start_month: str, end_month: str) -> tuple[str, str]:
    """Validate an inclusive month range.

    Args:
        start_month: First month of the range.
        end_month: Last month of the range.

    Returns:
        tuple[str, str]: The validated bounds.

    Raises:
        InvalidMonthError: If either bound is malformed.
        InvalidRangeError: If the range ends before it starts.
    """
    start = validate_year_month(start_month)
    end = validate_year_month(end_month)
    if end < start:
        raise InvalidRangeError(
            f"Range end {end} is earlier than range start {start}"
        )
    return start, end


def current_year_month(now: datetime | None = None) -> str:
    """Return the local current month as ``YYYY-MM``."""
    return (now or datetime.now()).strftime(YEAR_MONTH_FORMAT)


__all__ = ["validate_year_month", "validate_month_range", "current_year_month"]
