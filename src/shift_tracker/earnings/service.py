from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import parse_iso_date, today_local
from ..core.constants import DAYS_PER_WEEK, WEEK_START_WEEKDAY
from ..shifts.model import Shift
from .calculator.base import EarningsCalculator
from .calculator.standard_calculator import StandardEarningsCalculator


@dataclass(frozen=True)
class DashboardStats:
    total_hours: float
    total_tips: float
    total_wages: float
    total_earnings: float
    shift_count: int
    average_hourly_with_tips: float
    week_start: date
    week_end: date
    this_week_shift_count: int
    this_week_earnings: float


def week_bounds(today: date) -> tuple[date, date]:
    """[start, end) of the Sunday-to-Saturday week containing ``today``."""
    days_since_start = (today.weekday() - WEEK_START_WEEKDAY) % DAYS_PER_WEEK
    start = today - timedelta(days=days_since_start)
    return start, start + timedelta(days=DAYS_PER_WEEK)


class StatisticsService:
    """Aggregate earnings figures for the dashboard.

    Everything is recomputed from the given shifts on each call; nothing is cached.
    """

    def __init__(self, *, calculator: Optional[EarningsCalculator] = None):
        self._calculator = calculator or StandardEarningsCalculator()

    def shift_earnings(self, shift: Shift) -> float:
        return self._calculator.earnings(shift)

    def this_week(self, shifts: Iterable[Shift], *, today: Optional[date] = None) -> list[Shift]:
        start, end = week_bounds(today or today_local())
        return [s for s in shifts if start <= parse_iso_date(s.date) < end]

    def dashboard(self, shifts: Sequence[Shift], *, today: Optional[date] = None) -> DashboardStats:
        today = today or today_local()
        start, end = week_bounds(today)

        total_hours = sum((s.hours for s in shifts), 0.0)
        total_tips = sum((s.tips for s in shifts), 0.0)
        total_wages = sum((self._calculator.wages(s) for s in shifts), 0.0)
        total_earnings = total_tips + total_wages
        average = total_earnings / total_hours if total_hours > 0 else 0.0

        week = self.this_week(shifts, today=today)
        this_week_earnings = sum((self._calculator.earnings(s) for s in week), 0.0)

        return DashboardStats(
            total_hours=total_hours,
            total_tips=total_tips,
            total_wages=total_wages,
            total_earnings=total_earnings,
            shift_count=len(shifts),
            average_hourly_with_tips=average,
            week_start=start,
            week_end=end,
            this_week_shift_count=len(week),
            this_week_earnings=this_week_earnings,
        )
