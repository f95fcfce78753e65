import pytest

from timetable import (
    AvailableSlots,
    InvalidDurationError,
    NumberOfDaysError,
    OverlapError,
    Period,
    Timetable,
    TimetableConfig,
    Weekday,
)


EMPTY_TIMETABLE_FIVE = (
    "Timetable:\n"
    "For MONDAY, no periods.\n\n"
    "For TUESDAY, no periods.\n\n"
    "For WEDNESDAY, no periods.\n\n"
    "For THURSDAY, no periods.\n\n"
    "For FRIDAY, no periods.\n\n"
)
EMPTY_TIMETABLE_SEVEN = (
    EMPTY_TIMETABLE_FIVE
    + "For SATURDAY, no periods.\n\n"
    + "For SUNDAY, no periods.\n\n"
)


def test_constructor():
    assert str(Timetable(5)) == EMPTY_TIMETABLE_FIVE
    assert str(Timetable(7)) == EMPTY_TIMETABLE_SEVEN
    assert str(Timetable()) == EMPTY_TIMETABLE_FIVE


@pytest.mark.parametrize("days_in_week", [0, 8, -1])
def test_constructor_invalid_number_of_days(days_in_week):
    with pytest.raises(NumberOfDaysError):
        Timetable(days_in_week)


def test_from_config():
    assert Timetable.from_config(TimetableConfig(seven_days=True)).days_in_week == 7
    assert Timetable.from_config(TimetableConfig()).days_in_week == 5


def test_add_period_to_day():
    timetable = Timetable(5)

    assert timetable.add_period_to_day(1, Period.of(13, 14))
    assert timetable.add_period_to_day(1, Period.of(15, 17))
    assert timetable.add_period_to_day(5, Period.of(15, 17))
    assert timetable.add_period_to_day(5, Period.of(13, 14))

    assert timetable.get_day(Weekday.FRIDAY).periods == [Period.of(13, 14), Period.of(15, 17)]


def test_add_period_to_day_invalid_inputs():
    timetable = Timetable(5)
    timetable.add_period_to_day(1, Period.of(14, 16))

    with pytest.raises(OverlapError):
        timetable.add_period_to_day(1, Period.of(14, 16))
    with pytest.raises(NumberOfDaysError):
        timetable.add_period_to_day(10, Period.of(14, 16))
    with pytest.raises(NumberOfDaysError):
        timetable.add_period_to_day(6, Period.of(14, 16))
    with pytest.raises(NumberOfDaysError):
        timetable.add_period_to_day(0, Period.of(14, 16))

    assert timetable.get_day(Weekday.MONDAY).periods == [Period.of(14, 16)]


def test_add_periods_to_day():
    timetable = Timetable(7)

    assert timetable.add_periods_to_day(7, [Period.of(16, 18), Period.of(13, 15)])
    assert timetable.get_day(Weekday.SUNDAY).periods == [Period.of(13, 15), Period.of(16, 18)]

    with pytest.raises(OverlapError):
        timetable.add_periods_to_day(7, [Period.of(8, 9), Period.of(14, 15)])
    with pytest.raises(NumberOfDaysError):
        Timetable(5).add_periods_to_day(6, [Period.of(8, 9)])


def test_find_slots_invalid_duration(timetable_five):
    with pytest.raises(InvalidDurationError):
        timetable_five.find_slots(0)
    with pytest.raises(InvalidDurationError):
        timetable_five.find_slots(25)


def test_find_slots_defaults_search_whole_week(timetable_five):
    available_slots = timetable_five.find_slots(1)

    assert available_slots.days_of_week() == Weekday.first(5)
    assert not available_slots.is_common_slots
    assert available_slots.get_day(Weekday.TUESDAY).periods == [
        Period.of(hour, hour + 1) for hour in range(8, 22)
    ]


def test_find_slots_with_timeframe_and_days(timetable_five):
    available_slots = timetable_five.find_slots(
        1, Period.of(12, 18), {Weekday.MONDAY, Weekday.WEDNESDAY}
    )

    expected = AvailableSlots()
    expected.set_day(Weekday.MONDAY, [Period.of(12, 13), Period.of(15, 16)])
    expected.set_day(Weekday.WEDNESDAY, [Period.of(hour, hour + 1) for hour in range(12, 18)])
    assert available_slots == expected


def test_find_slots_drops_days_without_slots(timetable_five):
    available_slots = timetable_five.find_slots(4, Period.of(12, 18))

    assert Weekday.MONDAY not in available_slots.days
    assert Weekday.THURSDAY not in available_slots.days
    assert available_slots.days_of_week() == [Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.FRIDAY]


def test_find_slots_ignores_days_outside_week(timetable_five):
    available_slots = timetable_five.find_slots(2, days_of_week={Weekday.SATURDAY, Weekday.TUESDAY})

    assert available_slots.days_of_week() == [Weekday.TUESDAY]


def test_find_slots_seven_day_week():
    available_slots = Timetable(7).find_slots(14)

    assert available_slots.days_of_week() == Weekday.first(7)
    assert available_slots.get_day(Weekday.SUNDAY).periods == [Period.of(8, 22)]


def test_to_command_string(timetable_five):
    assert Timetable().to_command_string() == ""
    assert timetable_five.to_command_string() == "mon: 13-15, 16-18thu: 13-15, 16-18"


def test_equality(timetable_five):
    other = Timetable(5)
    other.add_periods_to_day(4, [Period.of(13, 15), Period.of(16, 18)])
    other.add_periods_to_day(1, [Period.of(13, 15), Period.of(16, 18)])

    assert timetable_five == other
    assert Timetable(5) != Timetable(7)
