from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import STORAGE_KEY
from ..core.exceptions import DomainError, DuplicateShiftError, NotFoundError, StorageCorruptError
from ..storage.record_store import RecordStore
from .hours import compute_hours
from .model import Coworker, Party, Shift
from .repository import ShiftRepository


def decode_shifts(raw: Any) -> list[Shift]:
    """Turn the stored value back into shifts; StorageCorruptError on a bad shape."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise StorageCorruptError(f"Expected a list of shifts, got {type(raw).__name__}")

    shifts: list[Shift] = []
    seen: set[str] = set()
    for item in raw:
        try:
            shift = Shift.from_dict(item)
            parse_iso_date(shift.date)
            compute_hours(shift.start_time, shift.end_time)
        except (AttributeError, KeyError, TypeError, ValueError, DomainError) as e:
            raise StorageCorruptError(f"Unreadable shift record: {e}") from e
        if shift.id in seen:
            raise StorageCorruptError(f"Duplicate shift id in storage: {shift.id}")
        seen.add(shift.id)
        shifts.append(shift)
    return shifts


class RecordStoreShiftRepository(ShiftRepository):
    """In-memory shift collection, loaded once and saved after every mutation."""

    def __init__(self, store: RecordStore, *, key: str = STORAGE_KEY):
        self._store = store
        self._key = key
        self._shifts: list[Shift] = self._load()

    def _load(self) -> list[Shift]:
        try:
            return decode_shifts(self._store.load(self._key, []))
        except StorageCorruptError as e:
            print(f"[shift-tracker] stored shifts unreadable, starting empty: {e}")
            return []

    def _commit(self, shifts: list[Shift]) -> None:
        # Memory only changes once the store has accepted the write.
        self._store.save(self._key, [s.to_dict() for s in shifts])
        self._shifts = shifts

    def _index_of(self, shift_id: str) -> int:
        for i, s in enumerate(self._shifts):
            if s.id == shift_id:
                return i
        raise NotFoundError(f"Shift not found: {shift_id}")

    def add(self, shift: Shift) -> None:
        if self.get_by_id(shift.id) is not None:
            raise DuplicateShiftError(f"Shift id already exists: {shift.id}")
        self._commit(self._shifts + [shift.normalized()])

    def update(self, shift: Shift) -> None:
        i = self._index_of(shift.id)
        shifts = list(self._shifts)
        shifts[i] = shift.normalized()
        self._commit(shifts)

    def remove(self, shift_id: str) -> None:
        # Coworkers/parties are embedded, so they go with the shift.
        i = self._index_of(shift_id)
        self._commit(self._shifts[:i] + self._shifts[i + 1 :])

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        for s in self._shifts:
            if s.id == shift_id:
                return s
        return None

    def list_all(self) -> Sequence[Shift]:
        return list(self._shifts)

    def list_sorted_by_date_desc(self) -> Sequence[Shift]:
        # sorted() is stable, so same-date shifts keep insertion order.
        return sorted(self._shifts, key=lambda s: s.date, reverse=True)

    def list_coworkers(self) -> Sequence[Coworker]:
        return [c for s in self._shifts for c in s.coworkers]

    def list_parties(self) -> Sequence[Party]:
        return [p for s in self._shifts for p in s.parties]
