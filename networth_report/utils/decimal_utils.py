"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def try_coerce_decimal(value) -> Decimal | None:
    """Normalize a value to Decimal, returning None when it is not numeric.

    Args:
        value: Raw value that may be missing, numeric, or garbage.

    Returns:
        Decimal | None: Finite Decimal value, or None for missing, boolean,
        non-numeric, NaN and infinite inputs.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        result = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not result.is_finite():
        return None
    return result


__all__ = ["coerce_decimal", "try_coerce_decimal"]
