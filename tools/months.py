"""Month key helpers.

A month key is the string YYYY-MM naming one budget period and its
storage partition.
"""

import re
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

_MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def month_key(day: Optional[date] = None) -> str:
    """Get the month key for a date (defaults to today)."""
    day = day or date.today()
    return f"{day.year:04d}-{day.month:02d}"


def parse_month_key(key: str) -> date:
    """Parse a month key into the first day of that month.

    Raises:
        ValueError: If the key is not a valid YYYY-MM string.
    """
    match = _MONTH_KEY_PATTERN.match(key or "")
    if not match:
        raise ValueError(f"Invalid month key: {key!r} (expected YYYY-MM)")

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month key: {key!r} (month must be 01-12)")
    return date(year, month, 1)


def is_month_key(key: str) -> bool:
    """Check whether a string is a valid month key."""
    try:
        parse_month_key(key)
    except ValueError:
        return False
    return True


def shift_month(key: str, offset: int) -> str:
    """Get the key of the month `offset` months away from `key`.

    Arithmetic starts from day 1 so short months are never skipped.
    """
    return month_key(parse_month_key(key) + relativedelta(months=offset))
