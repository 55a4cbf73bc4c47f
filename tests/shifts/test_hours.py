import pytest

from shift_tracker.core.exceptions import ValidationError
from shift_tracker.shifts.hours import compute_hours


def test_day_shift():
    assert compute_hours("09:00", "17:00") == 8.0


def test_overnight_shift_wraps_past_midnight():
    assert compute_hours("22:00", "02:00") == 4.0


def test_empty_time_gives_zero():
    assert compute_hours("", "17:00") == 0
    assert compute_hours("09:00", "") == 0


def test_same_start_and_end_is_zero():
    assert compute_hours("09:00", "09:00") == 0


def test_rounds_to_two_decimals():
    assert compute_hours("09:00", "09:20") == 0.33
    assert compute_hours("09:00", "09:10") == 0.17
    assert compute_hours("18:15", "01:45") == 7.5


def test_one_minute_before_start_is_almost_a_day():
    assert compute_hours("10:00", "09:59") == 23.98


def test_malformed_time_rejected():
    with pytest.raises(ValidationError):
        compute_hours("9am", "17:00")


@pytest.mark.parametrize(
    "start, end",
    [("9:5", "17:00"), ("9:05", "17:00"), ("09:00", "5:30"), (" 09:00", "17:00"), ("09:00:00", "17:00")],
)
def test_times_must_be_zero_padded_hhmm(start, end):
    with pytest.raises(ValidationError):
        compute_hours(start, end)
