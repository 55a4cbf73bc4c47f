"""Convert submitted form data into a Shift.

``form`` is anything with ``get(name, default)`` and ``getlist(name)``
(a Flask ``request.form`` in the app).
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Any

from ..common.validators import require_finite
from ..core.exceptions import ValidationError
from .model import Coworker, Party, Shift

COWORKER_FIELDS = ("name", "position", "location", "start_time", "end_time")
PARTY_FIELDS = ("name", "type", "details", "start_time", "end_time", "bartenders")


def parse_amount(value: Any, field_name: str) -> float:
    """Empty -> 0.0, like a cleared number input."""
    text = str(value or "").strip()
    if not text:
        return 0.0
    try:
        amount = float(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number")
    # "inf", "nan" and "1e400" all parse as floats
    return require_finite(amount, field_name)


def split_csv(value: str) -> list[str]:
    return [part.strip() for part in (value or "").split(",") if part.strip()]


def _rows(form, prefix: str, fields: tuple[str, ...]) -> list[dict[str, str]]:
    columns = [form.getlist(f"{prefix}_{f}") for f in fields]
    return [
        {f: (v or "").strip() for f, v in zip(fields, values)}
        for values in zip_longest(*columns, fillvalue="")
    ]


def coworkers_from_form(form, shift_id: str) -> tuple[Coworker, ...]:
    out = []
    for row in _rows(form, "coworker", COWORKER_FIELDS):
        if not row["name"] and not row["position"]:
            continue
        out.append(Coworker(shift_id=shift_id, **row))
    return tuple(out)


def parties_from_form(form, shift_id: str) -> tuple[Party, ...]:
    out = []
    for row in _rows(form, "party", PARTY_FIELDS):
        if not row["name"] and not row["type"] and not row["details"]:
            continue
        bartenders = tuple(split_csv(row.pop("bartenders")))
        out.append(Party(shift_id=shift_id, bartenders=bartenders, **row))
    return tuple(out)


def shift_from_form(form, shift_id: str, *, strict: bool = True) -> Shift:
    """Build the submitted shift.

    With ``strict=False`` unreadable amounts become 0.0 instead of raising, so
    a rejected form can be shown again with what the user typed.
    """

    def amount(name: str, label: str) -> float:
        try:
            return parse_amount(form.get(name), label)
        except ValidationError:
            if strict:
                raise
            return 0.0

    return Shift(
        id=shift_id,
        date=(form.get("date") or "").strip(),
        start_time=(form.get("start_time") or "").strip(),
        end_time=(form.get("end_time") or "").strip(),
        location=(form.get("location") or "").strip(),
        tips=amount("tips", "Tips"),
        hourly_rate=amount("hourly_rate", "Hourly rate"),
        notes=(form.get("notes") or "").strip(),
        tags=tuple(split_csv(form.get("tags") or "")),
        coworkers=coworkers_from_form(form, shift_id),
        parties=parties_from_form(form, shift_id),
    )
