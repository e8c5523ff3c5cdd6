"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through their string form so that ``10.1`` becomes
    ``Decimal("10.1")`` rather than its binary expansion.

    Args:
        value: Raw numeric value from callers, SQL rows or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is missing or cannot be read as a finite
            number.
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a monetary amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a monetary amount: {value!r}")
    return result


__all__ = ["coerce_decimal"]
