"""Amount parsing helpers shared by ledger operations."""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def parse_amount(value: Any) -> Optional[Decimal]:
    """Parse user input into a Decimal amount.

    Accepts numbers and numeric strings (surrounding whitespace ignored).

    Args:
        value: Raw amount as entered.

    Returns:
        Decimal amount, or None if the input is empty, non-numeric, boolean
        or too large to store as a finite number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return None

    # Amounts are stored as JSON numbers, so they must also fit in a float
    if not amount.is_finite() or not math.isfinite(float(amount)):
        return None
    return amount


def coerce_amount(value: Any) -> Decimal:
    """Parse an amount, falling back to zero for invalid input."""
    amount = parse_amount(value)
    return amount if amount is not None else Decimal("0")


def amount_text(amount: Decimal) -> str:
    """Plain string form of an amount without trailing zeros (e.g. '1184', '12.5')."""
    if amount == amount.to_integral_value():
        return format(amount.to_integral_value(), "f")
    return format(amount.normalize(), "f")
