from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import today_local
from ..common.formatting import format_currency, format_date
from ..common.ids import generate_shift_id
from ..common.validators import optional_hhmm, require_hhmm, require_iso_date, require_non_empty, require_non_negative
from ..core.constants import DEFAULT_HOURLY_RATE
from ..core.exceptions import NotFoundError, ValidationError
from ..earnings.service import StatisticsService
from .model import Shift
from .repository import ShiftRepository


class ShiftService:
    """Use cases: create, edit, delete and list shifts."""

    def __init__(
        self,
        shifts: ShiftRepository,
        *,
        statistics: Optional[StatisticsService] = None,
        default_hourly_rate: float = DEFAULT_HOURLY_RATE,
        id_factory: Callable[[], str] = generate_shift_id,
        today: Callable[[], date] = today_local,
    ):
        self._shifts = shifts
        self._statistics = statistics or StatisticsService()
        self._default_hourly_rate = float(default_hourly_rate)
        self._id_factory = id_factory
        self._today = today

    def new_shift(self) -> Shift:
        """Blank shift with a fresh id, today's date and the default rate."""
        return Shift(
            id=self._id_factory(),
            date=self._today().isoformat(),
            hourly_rate=self._default_hourly_rate,
        )

    def validate(self, shift: Shift) -> Shift:
        """Return the cleaned shift or raise ValidationError."""
        require_non_empty(shift.id, "Shift id")
        date_s = require_iso_date(shift.date, "Date")
        location = require_non_empty(shift.location, "Location")
        start = require_hhmm(shift.start_time, "Start time")
        end = require_hhmm(shift.end_time, "End time")
        require_non_negative(shift.tips, "Tips")
        require_non_negative(shift.hourly_rate, "Hourly rate")

        coworkers = tuple(
            replace(
                c,
                start_time=optional_hhmm(c.start_time, "Coworker start time"),
                end_time=optional_hhmm(c.end_time, "Coworker end time"),
            )
            for c in shift.coworkers
        )
        parties = tuple(
            replace(
                p,
                start_time=optional_hhmm(p.start_time, "Party start time"),
                end_time=optional_hhmm(p.end_time, "Party end time"),
            )
            for p in shift.parties
        )

        return replace(
            shift,
            date=date_s,
            location=location,
            start_time=start,
            end_time=end,
            notes=(shift.notes or "").strip(),
            coworkers=coworkers,
            parties=parties,
        ).normalized()

    def create(self, shift: Shift) -> str:
        shift = self.validate(shift)
        self._shifts.add(shift)
        return shift.id

    def update(self, shift: Shift) -> None:
        shift = self.validate(shift)
        self._shifts.update(shift)

    def delete(self, *, shift_id: str, confirmed: bool) -> None:
        if not confirmed:
            raise ValidationError("Please confirm that you want to delete this shift")
        self._shifts.remove(shift_id)

    def get(self, shift_id: str) -> Shift:
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            raise NotFoundError(f"Shift not found: {shift_id}")
        return shift

    def list_for_display(self) -> list[dict]:
        return [self._to_ui(s) for s in self._shifts.list_sorted_by_date_desc()]

    def _to_ui(self, s: Shift) -> dict:
        return {
            "id": s.id,
            "date": format_date(s.date),
            "location": s.location,
            "time_range": f"{s.start_time} - {s.end_time}",
            "hours": s.hours,
            "tips": format_currency(s.tips),
            "total": format_currency(self._statistics.shift_earnings(s)),
            "tags": list(s.tags),
            "coworkers": [f"{c.name} - {c.position}" for c in s.coworkers],
            "parties": [f"{p.name} - {p.type}" for p in s.parties],
            "notes": s.notes,
        }
