"""Available time slots of one person, or common to several people."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .day import Day
from .models import Period, Weekday


logger = logging.getLogger(__name__)


@dataclass
class AvailableSlots:
    """Free slots keyed by weekday.

    Every Day held here is overlap-unchecked. ``is_common_slots`` marks a
    report produced by intersecting several reports; it has no other effect.
    Reports are built fresh for each query and are not modified after being
    handed to the caller.
    """

    days: dict[Weekday, Day] = field(default_factory=dict)
    is_common_slots: bool = False

    def get_day(self, weekday: Weekday) -> Optional[Day]:
        return self.days.get(weekday)

    def days_of_week(self) -> list[Weekday]:
        return sorted(self.days)

    def set_day(self, weekday: Weekday, periods: Iterable[Period]) -> None:
        """Store the slots of a weekday, replacing any already stored."""
        weekday = Weekday(weekday)
        self.days[weekday] = Day.available(weekday, periods)

    def add_period_to_day(self, weekday: Weekday, period: Period) -> None:
        weekday = Weekday(weekday)
        if weekday in self.days:
            self.days[weekday].add_period(period)
        else:
            self.days[weekday] = Day.available(weekday, [period])

    def delete_day(self, weekday: Weekday) -> None:
        self.days.pop(weekday, None)

    def has_common_slots(self) -> bool:
        """Check whether any weekday has at least one slot."""
        return any(day.has_periods() for day in self.days.values())

    @staticmethod
    def find_all_days(all_available_slots: list["AvailableSlots"]) -> list[Weekday]:
        """Weekdays present in every report, in weekday order."""
        if not all_available_slots:
            return []

        weekdays = set(all_available_slots[0].days)
        for available_slots in all_available_slots[1:]:
            weekdays.intersection_update(available_slots.days)
        return sorted(weekdays)

    @staticmethod
    def find_all_common_slots(all_available_slots: Iterable["AvailableSlots"]) -> "AvailableSlots":
        """Find the slots shared by every report.

        A weekday missing from any report is left out of the result, and so
        is a weekday whose reports share no slot. The order of the reports
        does not matter.

        Args:
            all_available_slots: One report per person.

        Returns:
            A new report marked as common slots.
        """
        all_available_slots = list(all_available_slots)
        result = AvailableSlots(is_common_slots=True)

        for weekday in AvailableSlots.find_all_days(all_available_slots):
            common_day = Day.find_all_common_slots(
                available_slots.days[weekday] for available_slots in all_available_slots
            )
            if common_day.has_periods():
                result.days[weekday] = common_day

        logger.debug(
            "Intersected %d report(s): common slots on %s",
            len(all_available_slots),
            ", ".join(weekday.short_name for weekday in result.days_of_week()) or "no days",
        )
        return result

    def __str__(self) -> str:
        lines = ["Available Slots:\n"]
        for weekday in self.days_of_week():
            lines.append(f"{self.days[weekday]}\n")
        return "".join(lines)
