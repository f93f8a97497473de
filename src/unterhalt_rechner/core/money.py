"""Monetary rounding.

Amounts are rounded half away from zero (kaufmännische Rundung), which is
``ROUND_HALF_UP`` in the decimal module. ``Decimal.quantize`` on its own
would use banker's rounding from the default context.
"""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
EURO = Decimal("1")
ZERO = Decimal("0")


def round_cents(amount: Decimal) -> Decimal:
    """Round to two decimal places, half away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def floor_cents(amount: Decimal) -> Decimal:
    """Cut to two decimal places toward zero (for upper bounds such as caps)."""
    return amount.quantize(CENT, rounding=ROUND_DOWN)


def round_euro(amount: Decimal) -> int:
    """Round to a whole euro, half away from zero."""
    return int(amount.quantize(EURO, rounding=ROUND_HALF_UP))


def to_decimal(value) -> Decimal:
    """Convert an int, float or string to Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
