"""Text form of timetables and weekday lists.

A timetable is written as day tokens followed by comma-separated periods,
e.g. ``"mon: 13-15, 16-18 thu: 11-13"``. Encoding writes the days back to back
with no separator (``"mon: 13-15, 16-18thu: 11-13"``). Days without periods
are omitted.
"""

import re

from .config import DAYS_IN_TYPICAL_WEEK
from .exceptions import InvalidDayError, InvalidPeriodFormat, NumberOfDaysError
from .models import Period, Weekday
from .timetable import Timetable


DAY_TOKEN_PATTERN = re.compile(r"(mon|tue|wed|thu|fri|sat|sun):", re.IGNORECASE)


def encode_timetable(timetable: Timetable) -> str:
    return timetable.to_command_string()


def parse_periods(text: str) -> list[Period]:
    """Parse comma-separated periods, e.g. "13-15, 16-18".

    Blank text gives no periods.

    Raises:
        InvalidPeriodFormat: If any period is malformed.
        InvalidPeriodRange: If any period has an invalid range.
    """
    if not text.strip():
        return []
    return [Period.parse(part) for part in text.split(",")]


def parse_timetable(text: str, days_in_week: int = DAYS_IN_TYPICAL_WEEK) -> Timetable:
    """Parse the text form of a timetable.

    Args:
        text: Timetable text, e.g. "mon: 13-15, 16-18 thu: 11-13".
        days_in_week: Number of days the parsed timetable covers.

    Returns:
        A timetable holding the parsed busy periods.

    Raises:
        InvalidPeriodFormat: If the text is not made of day tokens and
            periods, or a day is given twice.
        InvalidPeriodRange: If a period has an invalid range.
        NumberOfDaysError: If a day is outside the week.
        OverlapError: If periods of the same day overlap.
    """
    timetable = Timetable(days_in_week)
    matches = list(DAY_TOKEN_PATTERN.finditer(text))

    leading = text[:matches[0].start()] if matches else text
    if leading.strip():
        raise InvalidPeriodFormat(f"Expected a day such as 'mon:' before '{leading.strip()}'.")

    seen: set[Weekday] = set()
    for index, match in enumerate(matches):
        weekday = Weekday.from_short_name(match.group(1))
        if weekday in seen:
            raise InvalidPeriodFormat(f"'{weekday.short_name}:' is given more than once.")
        seen.add(weekday)

        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        periods = parse_periods(text[match.end():end])
        if weekday > days_in_week:
            raise NumberOfDaysError()
        timetable.add_periods_to_day(weekday, periods)

    return timetable


def parse_days(text: str, days_in_week: int = DAYS_IN_TYPICAL_WEEK) -> set[Weekday]:
    """Parse comma-separated weekday names, e.g. "mon, tue, fri".

    Raises:
        InvalidDayError: If the text is blank, names an unknown day or a day
            outside the week.
    """
    if not text.strip():
        raise InvalidDayError()

    days = set()
    for part in text.split(","):
        try:
            weekday = Weekday.from_short_name(part)
        except KeyError:
            raise InvalidDayError(f"Unknown day: '{part.strip()}'.")
        if weekday > days_in_week:
            raise InvalidDayError()
        days.add(weekday)
    return days
