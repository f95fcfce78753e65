"""Value types for weekly timetables."""

import re
from dataclasses import dataclass, field
from enum import IntEnum

from .exceptions import InvalidPeriodFormat, InvalidPeriodRange


DEFAULT_PERIOD_NAME = "period"

HOURS_IN_DAY = 24

PERIOD_PATTERN = re.compile(r"^([0-9]{1,2})-([0-9]{1,2})$")


class Weekday(IntEnum):
    """Day of the week, numbered from 1 (Monday) to 7 (Sunday)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def short_name(self) -> str:
        """Three-letter lowercase name, e.g. "mon"."""
        return self.name[:3].lower()

    @classmethod
    def from_short_name(cls, short_name: str) -> "Weekday":
        """Look up a weekday by its three-letter name.

        Raises:
            KeyError: If the name is not a known weekday.
        """
        key = short_name.strip().lower()
        for weekday in cls:
            if weekday.short_name == key:
                return weekday
        raise KeyError(short_name)

    @classmethod
    def first(cls, count: int) -> list["Weekday"]:
        """The first ``count`` weekdays, starting on Monday."""
        return [cls(number) for number in range(1, count + 1)]


@dataclass(frozen=True, order=True)
class Period:
    """A whole-hour time range ``[start, end)`` within a single day.

    Periods compare, hash and sort by their hours only; the name is a
    display label.
    """

    name: str = field(compare=False)
    start: int
    end: int

    def __post_init__(self) -> None:
        for hour in (self.start, self.end):
            # bool is an int subclass
            if not isinstance(hour, int) or isinstance(hour, bool):
                raise InvalidPeriodRange("Period hours must be whole numbers.")
        if not (0 <= self.start < self.end <= HOURS_IN_DAY):
            raise InvalidPeriodRange()

    @classmethod
    def parse(cls, text: str, name: str = DEFAULT_PERIOD_NAME) -> "Period":
        """Parse a period written as ``START-END``, e.g. "13-15".

        Args:
            text: Period text; surrounding whitespace is ignored.
            name: Label for the created period.

        Returns:
            The parsed period.

        Raises:
            InvalidPeriodFormat: If the text is not two hours joined by "-".
            InvalidPeriodRange: If the hours do not form a valid range.
        """
        match = PERIOD_PATTERN.match(text.strip())
        if not match:
            raise InvalidPeriodFormat()

        start, end = map(int, match.groups())
        return cls(name, start, end)

    @classmethod
    def of(cls, start: int, end: int) -> "Period":
        """Create a period with the default name."""
        return cls(DEFAULT_PERIOD_NAME, start, end)

    @property
    def duration(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "Period") -> bool:
        """Check whether two periods share any time.

        Periods that only touch (one ends when the other starts) do not
        overlap.
        """
        return self.start < other.end and other.start < self.end

    def to_command_string(self) -> str:
        return f"{self.start}-{self.end}"

    def __str__(self) -> str:
        return f"Period: ({self.start}:00 to {self.end}:00)"
