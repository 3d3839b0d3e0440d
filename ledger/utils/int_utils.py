"""Helpers for integer normalization."""


def coerce_int(value) -> int:
    """Normalize numeric values from SQL aggregates to int.

    Args:
        value: Raw value from SQL or adapters (SUM over no rows is None).

    Returns:
        int: Normalized integer value.
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    return int(value)


__all__ = ["coerce_int"]
