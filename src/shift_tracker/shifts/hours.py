from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from ..common.datetime_utils import parse_hhmm

_REFERENCE_DAY = date(1970, 1, 1)
_TWO_PLACES = Decimal("0.01")


def compute_hours(start_time: str, end_time: str) -> float:
    """Duration between two HH:MM times in hours, 2 decimals, half-up.

    An end time earlier than the start time is taken to be on the next day.
    Either time empty -> 0.0.
    """
    if not start_time or not end_time:
        return 0.0

    t0 = datetime.combine(_REFERENCE_DAY, parse_hhmm(start_time))
    t1 = datetime.combine(_REFERENCE_DAY, parse_hhmm(end_time))
    if t1 < t0:
        t1 += timedelta(days=1)  # passed midnight

    minutes = int((t1 - t0).total_seconds() // 60)
    hours = (Decimal(minutes) / Decimal(60)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return float(hours)
