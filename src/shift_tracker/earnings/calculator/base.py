from __future__ import annotations

from abc import ABC, abstractmethod

from ...shifts.model import Shift


class EarningsCalculator(ABC):
    """Calculator interface (Strategy Pattern for per-shift earnings)."""

    @abstractmethod
    def wages(self, shift: Shift) -> float:
        raise NotImplementedError

    def earnings(self, shift: Shift) -> float:
        return shift.tips + self.wages(shift)
