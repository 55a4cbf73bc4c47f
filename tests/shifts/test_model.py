import pytest

from shift_tracker.shifts.model import Coworker, Party, Shift, unique_tags


def test_hours_is_derived_from_times(make_shift):
    shift = make_shift(start_time="22:00", end_time="02:30")
    assert shift.hours == 4.5


def test_unique_tags_strips_and_keeps_first_occurrence():
    assert unique_tags([" busy ", "patio", "busy", "", "  "]) == ("busy", "patio")


def test_normalized_dedupes_tags(make_shift):
    shift = make_shift(tags=("busy", " busy ", "slow", ""))
    assert shift.normalized().tags == ("busy", "slow")


def test_new_coworker_inherits_location_and_times(make_shift):
    shift = make_shift(location="Harbor Bar", start_time="17:00", end_time="01:00")
    coworker = shift.with_new_coworker().coworkers[-1]

    assert coworker == Coworker(
        shift_id=shift.id, location="Harbor Bar", start_time="17:00", end_time="01:00"
    )


def test_new_party_is_blank(make_shift):
    shift = make_shift()
    assert shift.with_new_party().parties == (Party(shift_id=shift.id),)


def test_normalized_points_children_at_owner(shift_with_children):
    shift = shift_with_children.normalized()
    assert [c.shift_id for c in shift.coworkers] == ["with-children"]
    assert [p.shift_id for p in shift.parties] == ["with-children"]


def test_from_dict_ignores_stored_hours(make_shift):
    data = make_shift(start_time="09:00", end_time="17:00").to_dict()
    assert data["hours"] == 8.0

    data["hours"] = 99
    assert Shift.from_dict(data).hours == 8.0


def test_dict_form_keeps_children(shift_with_children):
    shift = shift_with_children.normalized()
    assert Shift.from_dict(shift.to_dict()) == shift


@pytest.mark.parametrize("field", ["tips", "hourly_rate"])
@pytest.mark.parametrize("value", [float("inf"), float("nan"), "1e400"])
def test_from_dict_rejects_non_finite_amounts(make_shift, field, value):
    data = make_shift().to_dict()
    data[field] = value
    with pytest.raises(ValueError):
        Shift.from_dict(data)
