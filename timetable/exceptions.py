"""Exceptions raised by the timetable and availability model."""

from typing import Optional


class TimetableError(ValueError):
    """Base class for recoverable timetable errors.

    Each subclass carries a default message meant to be shown to the user
    as-is. Subclassing ValueError lets callers handle every input error in
    one place.
    """

    MESSAGE = "Invalid timetable input."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.MESSAGE)


class InvalidPeriodFormat(TimetableError):
    MESSAGE = (
        "Periods should be written as START-END in whole hours, "
        "e.g. 8-10 or 13-15."
    )


class InvalidPeriodRange(TimetableError):
    MESSAGE = (
        "The start of a period must be before its end, "
        "and both must be between 0 and 24."
    )


class InvalidDurationError(TimetableError):
    MESSAGE = "Duration must be a whole number of hours between 1 and 24."


class NumberOfDaysError(TimetableError):
    MESSAGE = "Day is outside the days of the week covered by this timetable."


class OverlapError(TimetableError):
    MESSAGE = "Period overlaps with an existing period on the same day."


class InvalidDayError(TimetableError):
    MESSAGE = "Days should be given as mon, tue, wed, thu, fri (sat, sun for 7-day weeks)."


class WeekdayMismatchError(RuntimeError):
    """Raised when days of different weekdays are intersected together.

    Not a TimetableError: no user input can trigger it, it means the caller
    assembled the inputs wrongly.
    """
