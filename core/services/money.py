"""
Money Utilities - Decimal arithmetic for prices and cart totals.

Prices arrive from the catalog as str/int/float/Decimal. Everything is
normalized to Decimal before any arithmetic so cart totals stay exact.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Currency precision used for line totals and grand totals
MONEY_PRECISION = Decimal("0.01")

ZERO = Decimal("0")


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return ZERO

    if isinstance(value, Decimal):
        return value

    try:
        # 10.5 -> "10.5" -> Decimal("10.5"), not the binary expansion
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return ZERO


def round_money(value: Number) -> Decimal:
    """Round a monetary value to cents (half-up)."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Number, factor: Number) -> Decimal:
    """Multiply a monetary value by a factor (e.g. a quantity)."""
    return to_decimal(value) * to_decimal(factor)


def to_float(value: Number) -> float:
    """
    Convert to float for display layers that expect plain numbers.

    Use only at the UI boundary, never for calculations.
    """
    return float(to_decimal(value))


def format_amount(value: Number) -> str:
    """
    Format an amount as a plain number string with two decimals.

    No currency symbol and no thousands separator, so the result can be
    parsed back with float().
    """
    return f"{round_money(value):.2f}"
