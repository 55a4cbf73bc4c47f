from shift_tracker.earnings.calculator.base import EarningsCalculator
from shift_tracker.earnings.calculator.standard_calculator import StandardEarningsCalculator
from shift_tracker.earnings.service import StatisticsService


def test_standard_calculator_pays_hours_times_rate(make_shift):
    shift = make_shift(start_time="22:00", end_time="02:00", hourly_rate=12.5, tips=30.0)

    calc = StandardEarningsCalculator()
    assert calc.wages(shift) == 50.0
    assert calc.earnings(shift) == 80.0


class TipsOnlyCalculator(EarningsCalculator):
    def wages(self, shift):
        return 0.0


def test_statistics_use_injected_calculator(make_shift, fixed_today):
    svc = StatisticsService(calculator=TipsOnlyCalculator())
    stats = svc.dashboard([make_shift(tips=25.0)], today=fixed_today)

    assert stats.total_wages == 0.0
    assert stats.total_earnings == 25.0
