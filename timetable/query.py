"""Common slot search across several timetables."""

import logging
from typing import Iterable, Optional

from .available_slots import AvailableSlots
from .exceptions import InvalidDurationError
from .models import HOURS_IN_DAY, Period, Weekday
from .timetable import Timetable


logger = logging.getLogger(__name__)


def find_common_slots(
    timetables: Iterable[Timetable],
    duration: int,
    timeframe: Optional[Period] = None,
    days_of_week: Optional[Iterable[Weekday]] = None,
) -> AvailableSlots:
    """Find the slots in which every timetable is free.

    Args:
        timetables: Busy timetables of the people to meet.
        duration: Slot length in hours, 1 to 24.
        timeframe: Daily window to search in. Defaults to 8-22.
        days_of_week: Weekdays to search. Defaults to each timetable's week.

    Returns:
        The common slots, marked as such even for a single timetable.

    Raises:
        InvalidDurationError: If duration is outside 1 to 24.
    """
    if not 1 <= duration <= HOURS_IN_DAY:
        raise InvalidDurationError()
    if days_of_week is not None:
        days_of_week = set(days_of_week)

    reports = [
        timetable.find_slots(duration, timeframe, days_of_week)
        for timetable in timetables
    ]
    logger.info("Searching common %dh slots across %d timetable(s)", duration, len(reports))
    return AvailableSlots.find_all_common_slots(reports)
