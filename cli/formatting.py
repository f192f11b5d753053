"""Display helpers shared by CLI commands."""

from decimal import Decimal

from tools.months import parse_month_key


def format_currency(amount) -> str:
    """Format an amount as dollars with thousands separators, e.g. $1,234.50."""
    value = Decimal(str(amount or 0))
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def month_label(key: str) -> str:
    """Human readable month name, e.g. 'January 2024' for '2024-01'."""
    return parse_month_key(key).strftime("%B %Y")


def parse_position(position: int, size: int) -> int:
    """Convert a 1-based position shown to the user into a list index.

    Raises:
        ValueError: If the position is outside 1..size.
    """
    if not 1 <= position <= size:
        raise ValueError(f"Position must be between 1 and {size}, got {position}")
    return position - 1
