from __future__ import annotations

import math

from ..core.exceptions import ValidationError
from .datetime_utils import parse_hhmm, parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_finite(value: float, field_name: str) -> float:
    if value is None or not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a number")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    require_finite(value, field_name)
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_iso_date(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    parse_iso_date(value)
    return value


def require_hhmm(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    parse_hhmm(value)
    return value


def optional_hhmm(value: str, field_name: str) -> str:
    """Empty is allowed; anything else must be HH:MM."""
    if not value or not value.strip():
        return ""
    return require_hhmm(value, field_name)
