from __future__ import annotations

from datetime import date

import pytest

from shift_tracker.shifts.model import Coworker, Party, Shift
from shift_tracker.shifts.store_repository import RecordStoreShiftRepository
from shift_tracker.storage.memory_store import InMemoryRecordStore


@pytest.fixture
def fixed_today() -> date:
    # A Wednesday; the week runs Sun 2024-03-03 .. Sat 2024-03-09.
    return date(2024, 3, 6)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def repo(store) -> RecordStoreShiftRepository:
    return RecordStoreShiftRepository(store)


@pytest.fixture
def make_shift():
    counter = {"n": 0}

    def _make(**overrides) -> Shift:
        counter["n"] += 1
        data = {
            "id": f"shift-{counter['n']}",
            "date": "2024-03-04",
            "start_time": "18:00",
            "end_time": "23:00",
            "location": "The Tap Room",
            "tips": 40.0,
            "hourly_rate": 15.0,
        }
        data.update(overrides)
        return Shift(**data)

    return _make


@pytest.fixture
def shift_with_children(make_shift) -> Shift:
    shift = make_shift(id="with-children", tags=("busy", "patio"))
    return Shift(
        **{
            **shift.__dict__,
            "coworkers": (Coworker(shift_id="", name="Sam", position="Barback"),),
            "parties": (Party(shift_id="", name="Lee wedding", type="Wedding", bartenders=("Sam", "Ana")),),
        }
    )
