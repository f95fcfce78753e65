"""Weekly timetables and common free slot search."""

from .available_slots import AvailableSlots
from .codec import encode_timetable, parse_days, parse_timetable
from .config import TimetableConfig
from .day import DEFAULT_TIMEFRAME, Day, OverlapMode
from .exceptions import (
    InvalidDayError,
    InvalidDurationError,
    InvalidPeriodFormat,
    InvalidPeriodRange,
    NumberOfDaysError,
    OverlapError,
    TimetableError,
    WeekdayMismatchError,
)
from .models import Period, Weekday
from .query import find_common_slots
from .timetable import Timetable

__all__ = [
    "AvailableSlots",
    "DEFAULT_TIMEFRAME",
    "Day",
    "InvalidDayError",
    "InvalidDurationError",
    "InvalidPeriodFormat",
    "InvalidPeriodRange",
    "NumberOfDaysError",
    "OverlapError",
    "OverlapMode",
    "Period",
    "Timetable",
    "TimetableConfig",
    "TimetableError",
    "Weekday",
    "WeekdayMismatchError",
    "encode_timetable",
    "find_common_slots",
    "parse_days",
    "parse_timetable",
]
