from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Coworker, Party, Shift


class ShiftRepository(Protocol):
    """Repository interface for shifts.

    Services depend on this interface, not on a concrete store.
    """

    def add(self, shift: Shift) -> None:
        raise NotImplementedError

    def update(self, shift: Shift) -> None:
        raise NotImplementedError

    def remove(self, shift_id: str) -> None:
        """Delete the shift together with its coworkers and parties."""

        raise NotImplementedError

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def list_sorted_by_date_desc(self) -> Sequence[Shift]:
        raise NotImplementedError

    def list_coworkers(self) -> Sequence[Coworker]:
        raise NotImplementedError

    def list_parties(self) -> Sequence[Party]:
        raise NotImplementedError
