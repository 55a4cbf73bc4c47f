"""Display formatting for money, dates and hour totals (en-US)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .datetime_utils import parse_iso_date

_CENT = Decimal("0.01")
_TENTH = Decimal("0.1")

# Fixed English names; strftime("%a"/"%b") follows the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_currency(amount: float) -> str:
    """Render an amount as US dollars: 1234.5 -> "$1,234.50", -3 -> "-$3.00"."""
    value = Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_date(iso_date: str) -> str:
    """Render "2024-03-05" as "Tue, Mar 5, 2024"."""
    d = parse_iso_date(iso_date)
    return f"{_WEEKDAYS[d.weekday()]}, {_MONTHS[d.month - 1]} {d.day}, {d.year}"


def format_hours(hours: float) -> str:
    value = Decimal(str(hours)).quantize(_TENTH, rounding=ROUND_HALF_UP)
    return f"{value:.1f}"
