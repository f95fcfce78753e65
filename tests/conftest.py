import pytest

from timetable import Day, Period, Timetable, Weekday


@pytest.fixture
def busy_monday():
    """mon: 13-15, 16-18"""
    return Day(Weekday.MONDAY, [Period.of(13, 15), Period.of(16, 18)])


@pytest.fixture
def timetable_five():
    """mon: 13-15, 16-18 thu: 13-15, 16-18"""
    timetable = Timetable(5)
    timetable.add_periods_to_day(1, [Period.of(13, 15), Period.of(16, 18)])
    timetable.add_periods_to_day(4, [Period.of(16, 18), Period.of(13, 15)])
    return timetable


@pytest.fixture(autouse=True)
def clean_timetable_env(monkeypatch):
    for name in ("TIMETABLE_SEVEN_DAYS", "TIMETABLE_DAY_START", "TIMETABLE_DAY_END"):
        monkeypatch.delenv(name, raising=False)
