from __future__ import annotations

import re
from datetime import date, datetime, time

from ..core.exceptions import ValidationError

# strptime alone also accepts "9:5" and "2024-3-5".
_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_HHMM_RE = re.compile(r"\d{2}:\d{2}")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        if not _ISO_DATE_RE.fullmatch(value):
            raise ValueError(value)
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}")


def parse_hhmm(value: str) -> time:
    """Parse a zero-padded HH:MM string into time."""
    try:
        if not _HHMM_RE.fullmatch(value):
            raise ValueError(value)
        return datetime.strptime(value, "%H:%M").time()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid time: {value!r}")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().date()
