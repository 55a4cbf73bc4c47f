from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping

from ..core.constants import DEFAULT_HOURLY_RATE
from .hours import compute_hours


def unique_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """Strip, drop blanks and duplicates; first occurrence wins."""
    out: list[str] = []
    for tag in tags:
        tag = (tag or "").strip()
        if tag and tag not in out:
            out.append(tag)
    return tuple(out)


@dataclass(frozen=True)
class Coworker:
    """Someone who worked alongside the shift owner. Owned by its Shift."""

    shift_id: str
    name: str = ""
    position: str = ""
    location: str = ""
    start_time: str = ""
    end_time: str = ""

    def to_dict(self) -> dict:
        return {
            "shift_id": self.shift_id,
            "name": self.name,
            "position": self.position,
            "location": self.location,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Coworker":
        return Coworker(
            shift_id=str(data.get("shift_id") or ""),
            name=str(data.get("name") or ""),
            position=str(data.get("position") or ""),
            location=str(data.get("location") or ""),
            start_time=str(data.get("start_time") or ""),
            end_time=str(data.get("end_time") or ""),
        )


@dataclass(frozen=True)
class Party:
    """A private event/booking during the shift. Owned by its Shift."""

    shift_id: str
    name: str = ""
    type: str = ""
    details: str = ""
    start_time: str = ""
    end_time: str = ""
    bartenders: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "shift_id": self.shift_id,
            "name": self.name,
            "type": self.type,
            "details": self.details,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "bartenders": list(self.bartenders),
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Party":
        bartenders = data.get("bartenders") or []
        if not isinstance(bartenders, (list, tuple)):
            raise TypeError("bartenders must be a list")
        return Party(
            shift_id=str(data.get("shift_id") or ""),
            name=str(data.get("name") or ""),
            type=str(data.get("type") or ""),
            details=str(data.get("details") or ""),
            start_time=str(data.get("start_time") or ""),
            end_time=str(data.get("end_time") or ""),
            bartenders=tuple(str(b) for b in bartenders),
        )


@dataclass(frozen=True)
class Shift:
    """Domain entity: one worked period with pay, tips and times."""

    id: str
    date: str
    start_time: str = ""
    end_time: str = ""
    location: str = ""
    tips: float = 0.0
    hourly_rate: float = DEFAULT_HOURLY_RATE
    notes: str = ""
    tags: tuple[str, ...] = ()
    coworkers: tuple[Coworker, ...] = field(default_factory=tuple)
    parties: tuple[Party, ...] = field(default_factory=tuple)

    @property
    def hours(self) -> float:
        """Always derived from start/end, never stored independently."""
        return compute_hours(self.start_time, self.end_time)

    def normalized(self) -> "Shift":
        """Copy with deduplicated tags and children pointing at this shift."""
        return replace(
            self,
            tags=unique_tags(self.tags),
            coworkers=tuple(replace(c, shift_id=self.id) for c in self.coworkers),
            parties=tuple(replace(p, shift_id=self.id) for p in self.parties),
        )

    def with_new_coworker(self) -> "Shift":
        """Append a blank coworker defaulting to this shift's location and times."""
        coworker = Coworker(
            shift_id=self.id,
            location=self.location,
            start_time=self.start_time,
            end_time=self.end_time,
        )
        return replace(self, coworkers=self.coworkers + (coworker,))

    def with_new_party(self) -> "Shift":
        return replace(self, parties=self.parties + (Party(shift_id=self.id),))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "location": self.location,
            "tips": self.tips,
            "hourly_rate": self.hourly_rate,
            # Informational only; recomputed from start/end on load.
            "hours": self.hours,
            "notes": self.notes,
            "tags": list(self.tags),
            "coworkers": [c.to_dict() for c in self.coworkers],
            "parties": [p.to_dict() for p in self.parties],
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Shift":
        """Build a Shift from its stored form.

        Raises KeyError/TypeError/ValueError on data of the wrong shape.
        """
        tags = data.get("tags") or []
        coworkers = data.get("coworkers") or []
        parties = data.get("parties") or []
        if not isinstance(tags, list) or not isinstance(coworkers, list) or not isinstance(parties, list):
            raise TypeError("tags, coworkers and parties must be lists")

        rate = data.get("hourly_rate")
        tips = float(data.get("tips") or 0)
        hourly_rate = float(DEFAULT_HOURLY_RATE if rate is None else rate)
        if not (math.isfinite(tips) and math.isfinite(hourly_rate)):
            raise ValueError("tips and hourly_rate must be finite")

        return Shift(
            id=str(data["id"]),
            date=str(data["date"]),
            start_time=str(data.get("start_time") or ""),
            end_time=str(data.get("end_time") or ""),
            location=str(data.get("location") or ""),
            tips=tips,
            hourly_rate=hourly_rate,
            notes=str(data.get("notes") or ""),
            tags=tuple(str(t) for t in tags),
            coworkers=tuple(Coworker.from_dict(c) for c in coworkers),
            parties=tuple(Party.from_dict(p) for p in parties),
        ).normalized()
