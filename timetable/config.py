"""Timetable configuration, optionally read from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .day import DEFAULT_END_TIME_OF_DAY, DEFAULT_START_TIME_OF_DAY
from .models import DEFAULT_PERIOD_NAME, Period, Weekday


DAYS_IN_TYPICAL_WEEK = 5
DAYS_IN_FULL_WEEK = 7

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TimetableConfig:
    """Settings shared by the timetables of one application.

    Attributes:
        seven_days: Track Saturday and Sunday as well as Monday to Friday.
        day_start: Start hour of the default search timeframe.
        day_end: End hour of the default search timeframe.
    """

    seven_days: bool = False
    day_start: int = DEFAULT_START_TIME_OF_DAY
    day_end: int = DEFAULT_END_TIME_OF_DAY

    def __post_init__(self) -> None:
        # Raises InvalidPeriodRange for unusable hours.
        Period(DEFAULT_PERIOD_NAME, self.day_start, self.day_end)

    @property
    def days_in_week(self) -> int:
        return DAYS_IN_FULL_WEEK if self.seven_days else DAYS_IN_TYPICAL_WEEK

    @property
    def all_days_of_week(self) -> frozenset[Weekday]:
        return frozenset(Weekday.first(self.days_in_week))

    @property
    def default_timeframe(self) -> Period:
        return Period(DEFAULT_PERIOD_NAME, self.day_start, self.day_end)

    @classmethod
    def from_env(cls) -> "TimetableConfig":
        """Build a config from environment variables (and a .env file).

        Reads TIMETABLE_SEVEN_DAYS, TIMETABLE_DAY_START and TIMETABLE_DAY_END;
        unset variables keep their defaults.

        Raises:
            InvalidPeriodRange: If the configured hours are not a valid range.
            ValueError: If an hour is not an integer.
        """
        load_dotenv()

        seven_days = os.getenv("TIMETABLE_SEVEN_DAYS", "false").strip().lower() in TRUE_VALUES
        day_start = int(os.getenv("TIMETABLE_DAY_START", DEFAULT_START_TIME_OF_DAY))
        day_end = int(os.getenv("TIMETABLE_DAY_END", DEFAULT_END_TIME_OF_DAY))
        return cls(seven_days=seven_days, day_start=day_start, day_end=day_end)
