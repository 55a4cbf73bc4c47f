from datetime import date, time

import pytest

from shift_tracker.common.datetime_utils import parse_hhmm, parse_iso_date
from shift_tracker.core.exceptions import ValidationError


def test_parse_iso_date():
    assert parse_iso_date("2024-03-05") == date(2024, 3, 5)


@pytest.mark.parametrize("value", ["2024-3-5", "2024-03-5", "24-03-05", "2024-03-05 ", "2024-02-30", "", None])
def test_parse_iso_date_is_strict(value):
    with pytest.raises(ValidationError):
        parse_iso_date(value)


def test_parse_hhmm():
    assert parse_hhmm("07:05") == time(7, 5)
    assert parse_hhmm("23:59") == time(23, 59)


@pytest.mark.parametrize("value", ["9:5", "9:05", "09:5", "24:00", "0905", "09:05 ", "", None])
def test_parse_hhmm_is_strict(value):
    with pytest.raises(ValidationError):
        parse_hhmm(value)
