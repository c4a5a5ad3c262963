"""Utility functions for money and clock-time handling."""

from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple, Union

CENT = Decimal("0.01")


def to_money(value: Union[Decimal, float, int, str]) -> Decimal:
    """
    Convert a value to a Decimal rounded to cents.

    Floats go through str() so that 0.1 stays 0.1.

    Examples:
        >>> to_money("10000000")
        Decimal('10000000.00')
        >>> to_money(20000.005)
        Decimal('20000.01')
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    """
    Format money compactly for log lines.

    Args:
        amount: Amount to format

    Returns:
        Formatted string like "$1.23M"

    Examples:
        >>> format_money(Decimal("1234567.89"))
        '$1.23M'
        >>> format_money(Decimal("-20000"))
        '-$20.00K'
        >>> format_money(Decimal("999.5"))
        '$999.50'
    """
    negative = amount < 0
    absolute = abs(amount)

    if absolute >= 1_000_000_000:
        formatted = f"${absolute / 1_000_000_000:.2f}B"
    elif absolute >= 1_000_000:
        formatted = f"${absolute / 1_000_000:.2f}M"
    elif absolute >= 1_000:
        formatted = f"${absolute / 1_000:.2f}K"
    else:
        formatted = f"${absolute:.2f}"

    return f"-{formatted}" if negative else formatted


def parse_hhmm(value: str) -> time:
    """Parse an "HH:MM" string into a time."""
    hours, minutes = value.split(":")
    return time(hour=int(hours), minute=int(minutes))


def format_hhmm(value: time) -> str:
    """Format a time as "HH:MM"."""
    return f"{value.hour:02d}:{value.minute:02d}"


def add_minutes(day: date, hhmm: str, minutes: int) -> Tuple[date, str]:
    """
    Add minutes to a date and "HH:MM" clock time.

    Args:
        day: Start date
        hhmm: Start time as "HH:MM"
        minutes: Minutes to add

    Returns:
        (date, "HH:MM") after the offset
    """
    start = datetime.combine(day, parse_hhmm(hhmm))
    end = start + timedelta(minutes=minutes)
    return end.date(), format_hhmm(end.time())
