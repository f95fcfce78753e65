"""Weekly timetable of a person's busy periods."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .available_slots import AvailableSlots
from .config import DAYS_IN_FULL_WEEK, DAYS_IN_TYPICAL_WEEK, TimetableConfig
from .day import DEFAULT_TIMEFRAME, Day
from .exceptions import InvalidDurationError, NumberOfDaysError
from .models import HOURS_IN_DAY, Period, Weekday


logger = logging.getLogger(__name__)


@dataclass
class Timetable:
    """One person's busy periods for each day of the week.

    The week always starts on Monday and covers ``days_in_week`` days,
    normally 5 (Monday to Friday) or 7.
    """

    days_in_week: int = DAYS_IN_TYPICAL_WEEK
    days: list[Day] = field(init=False)

    def __post_init__(self) -> None:
        if not 1 <= self.days_in_week <= DAYS_IN_FULL_WEEK:
            raise NumberOfDaysError()
        self.days = [Day.busy(weekday) for weekday in Weekday.first(self.days_in_week)]

    @classmethod
    def from_config(cls, config: TimetableConfig) -> "Timetable":
        return cls(config.days_in_week)

    @property
    def all_days_of_week(self) -> set[Weekday]:
        return {day.weekday for day in self.days}

    def _check_day_number(self, day_number: int) -> None:
        if not 1 <= day_number <= self.days_in_week:
            raise NumberOfDaysError()

    def get_day(self, weekday: Weekday) -> Day:
        """Get the Day for a weekday.

        Raises:
            NumberOfDaysError: If the weekday is not part of this timetable.
        """
        self._check_day_number(int(weekday))
        return self.days[int(weekday) - 1]

    def add_period_to_day(self, day_number: int, period: Period) -> bool:
        """Add a busy period to a day.

        Args:
            day_number: Day of the week, 1 for Monday.
            period: Busy period to add.

        Returns:
            True once the period is added.

        Raises:
            NumberOfDaysError: If the day is not part of this timetable.
            OverlapError: If the period overlaps a busy period of that day.
        """
        return self.get_day(day_number).add_period(period)

    def add_periods_to_day(self, day_number: int, periods: Iterable[Period]) -> bool:
        """Add several busy periods to a day, stopping at the first overlap."""
        day = self.get_day(day_number)
        for period in periods:
            day.add_period(period)
        return True

    def find_slots(
        self,
        duration: int,
        timeframe: Optional[Period] = None,
        days_of_week: Optional[Iterable[Weekday]] = None,
    ) -> AvailableSlots:
        """Find all free slots of a given length across the week.

        Args:
            duration: Slot length in hours, 1 to 24.
            timeframe: Daily window to search in. Defaults to 8-22.
            days_of_week: Weekdays to search. Defaults to every day of this
                timetable; weekdays outside it are ignored.

        Returns:
            Free slots per weekday. Weekdays without any free slot are left
            out.

        Raises:
            InvalidDurationError: If duration is outside 1 to 24.
        """
        if not 1 <= duration <= HOURS_IN_DAY:
            raise InvalidDurationError()

        timeframe = timeframe or DEFAULT_TIMEFRAME
        wanted = self.all_days_of_week if days_of_week is None else set(days_of_week)

        available_slots = AvailableSlots()
        for day in self.days:
            if day.weekday not in wanted:
                continue
            slots = day.find_slots(duration, timeframe)
            if slots:
                available_slots.set_day(day.weekday, slots)

        logger.debug(
            "Timetable has slots of %dh on %d of %d searched day(s)",
            duration, len(available_slots.days), len(wanted & self.all_days_of_week),
        )
        return available_slots

    def to_command_string(self) -> str:
        """Convert back into command form, e.g. "mon: 13-15, 16-18tue: 12-18".

        Days without periods are left out.
        """
        return "".join(day.to_command_string() for day in self.days if day.has_periods())

    def __str__(self) -> str:
        return "Timetable:\n" + "".join(f"{day}\n" for day in self.days)
