"""A single weekday of a timetable."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union

from .exceptions import InvalidDurationError, OverlapError, WeekdayMismatchError
from .models import DEFAULT_PERIOD_NAME, HOURS_IN_DAY, Period, Weekday


logger = logging.getLogger(__name__)

DEFAULT_START_TIME_OF_DAY = 8  # 8 AM
DEFAULT_END_TIME_OF_DAY = 22  # 10 PM
DEFAULT_TIMEFRAME = Period(DEFAULT_PERIOD_NAME, DEFAULT_START_TIME_OF_DAY, DEFAULT_END_TIME_OF_DAY)


class OverlapMode(Enum):
    """Whether a Day rejects overlapping periods.

    CHECKED days hold a person's busy periods. UNCHECKED days hold slot
    search results, where candidate slots may overlap each other.
    """

    CHECKED = "checked"
    UNCHECKED = "unchecked"


@dataclass
class Day:
    """The periods of one weekday, kept sorted by start time.

    The overlap mode is fixed when the Day is created and is not part of
    equality: two Days are equal when they have the same weekday and the
    same periods.
    """

    weekday: Weekday
    periods: list[Period] = field(default_factory=list)
    mode: OverlapMode = field(default=OverlapMode.CHECKED, compare=False)

    def __post_init__(self) -> None:
        self.weekday = Weekday(self.weekday)
        initial = list(self.periods)
        self.periods = []
        self.add_periods(initial)

    @classmethod
    def busy(cls, weekday: Weekday) -> "Day":
        """Create an empty overlap-checked day."""
        return cls(weekday, mode=OverlapMode.CHECKED)

    @classmethod
    def available(cls, weekday: Weekday, periods: Iterable[Period] = ()) -> "Day":
        """Create an overlap-unchecked day holding the given slots."""
        return cls(weekday, list(periods), OverlapMode.UNCHECKED)

    @property
    def checks_for_overlaps(self) -> bool:
        return self.mode is OverlapMode.CHECKED

    @property
    def sort_key(self) -> int:
        return int(self.weekday)

    def is_same_day(self, other: Union["Day", Weekday]) -> bool:
        if isinstance(other, Day):
            return self.weekday == other.weekday
        return self.weekday == other

    def has_periods(self) -> bool:
        return bool(self.periods)

    def is_sorted(self) -> bool:
        return self.periods == sorted(self.periods)

    def add_period(self, period: Period) -> bool:
        """Add a period, keeping the periods sorted.

        Args:
            period: Period to add.

        Returns:
            True once the period is added.

        Raises:
            OverlapError: If this day checks for overlaps and the period
                overlaps an existing one. The day is left unchanged.
        """
        if self.checks_for_overlaps and self.has_any_overlaps(period):
            raise OverlapError()

        self.periods.append(period)
        self.periods.sort()
        return True

    def add_periods(self, periods: Iterable[Period]) -> bool:
        """Add several periods in order, stopping at the first overlap."""
        for period in periods:
            self.add_period(period)
        return True

    def has_any_overlaps(self, period_to_check: Period) -> bool:
        return any(period.overlaps(period_to_check) for period in self.periods)

    def find_slots(self, duration: int, timeframe: Period = DEFAULT_TIMEFRAME) -> list[Period]:
        """Find every placement of a slot that is free on this day.

        Each whole hour from the start of the timeframe is tried as a slot
        start, so consecutive results may overlap each other (8-10 and 9-11
        are both reported when 8-11 is free).

        Args:
            duration: Slot length in hours, 1 to 24.
            timeframe: Only slots fully inside this period are returned.

        Returns:
            Free slots sorted by start time.

        Raises:
            InvalidDurationError: If duration is outside 1 to 24.
        """
        if not 1 <= duration <= HOURS_IN_DAY:
            raise InvalidDurationError()

        slots = []
        for hour in range(timeframe.start, timeframe.end - duration + 1):
            slot = Period(DEFAULT_PERIOD_NAME, hour, hour + duration)
            if not self.has_any_overlaps(slot):
                slots.append(slot)

        logger.debug(
            "Found %d slot(s) of %dh on %s within %s",
            len(slots), duration, self.weekday.name, timeframe.to_command_string(),
        )
        return slots

    @staticmethod
    def find_all_common_slots(days: Iterable["Day"]) -> "Day":
        """Intersect the periods of several days of the same weekday.

        Periods are matched by exact start and end, not by overlap.

        Args:
            days: Days to intersect, all for the same weekday.

        Returns:
            A new unchecked Day with the periods present in every input.

        Raises:
            ValueError: If no days are given.
            WeekdayMismatchError: If the days are not all the same weekday.
        """
        days = list(days)
        if not days:
            raise ValueError("At least one day is needed to find common slots.")

        weekday = days[0].weekday
        common = set(days[0].periods)
        for day in days:
            if not day.is_same_day(weekday):
                raise WeekdayMismatchError(
                    f"Cannot find common slots between {weekday.name} and {day.weekday.name}."
                )
            common.intersection_update(day.periods)

        return Day.available(weekday, sorted(common))

    def to_command_string(self) -> str:
        """Convert this day back into its command form, e.g. "mon: 13-15, 16-18".

        Returns an empty string for a day without periods.
        """
        if not self.periods:
            return ""

        periods = ", ".join(period.to_command_string() for period in self.periods)
        return f"{self.weekday.short_name}: {periods}"

    def __str__(self) -> str:
        if not self.has_periods():
            return f"For {self.weekday.name}, no periods.\n"

        lines = [f"For {self.weekday.name}, schedule is:"]
        lines.extend(str(period) for period in self.periods)
        return "\n".join(lines) + "\n"
