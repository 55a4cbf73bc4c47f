from __future__ import annotations

from .base import EarningsCalculator
from ...shifts.model import Shift


class StandardEarningsCalculator(EarningsCalculator):
    """Standard rule: hours * hourly_rate, tips added on top."""

    def wages(self, shift: Shift) -> float:
        return shift.hours * shift.hourly_rate
