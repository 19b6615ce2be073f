"""Decimal money helpers.

All monetary values in the core are Decimal amounts rounded half-up to cents.
"""

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert a value to a Decimal rounded to cents.

    Floats are converted through their string form so that 12.5 becomes
    Decimal("12.50") rather than its binary expansion.

    Args:
        value: Amount to convert

    Returns:
        Decimal: Amount rounded half-up to two decimal places
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)
