"""iCalendar transformer for busy timetables."""

import hashlib
from datetime import date, datetime, time, timedelta
from typing import Mapping, Optional

from icalendar import Calendar, Event, vRecur

from timetable import Day, Period, Timetable
from timetable.models import DEFAULT_PERIOD_NAME, HOURS_IN_DAY
from .base import BaseTransformer


class ICalTransformer(BaseTransformer):
    """Transformer that exports busy periods as weekly recurring events.

    Times are written as floating local times (no timezone).
    """

    PRODID = "-//Timetable Slots//timetable-slots//EN"
    UID_DOMAIN = "timetable-slots"

    def __init__(self, calendar_name: str = "Timetables") -> None:
        """Initialize the iCalendar transformer.

        Args:
            calendar_name: Display name of the generated calendar.
        """
        self._calendar: Optional[Calendar] = None
        self._calendar_name = calendar_name

    def _generate_uid(self, owner: str, day: Day, period: Period, start_date: date) -> str:
        """Generate a unique identifier for a busy period.

        Args:
            owner: Name of the timetable's owner.
            day: Day the period belongs to.
            period: The busy period.
            start_date: Start date of the export.

        Returns:
            Unique identifier string.
        """
        unique_string = (
            f"{owner}-{day.weekday.short_name}-"
            f"{period.to_command_string()}-{start_date}"
        )
        return hashlib.md5(unique_string.encode()).hexdigest() + "@" + self.UID_DOMAIN

    def _find_first_occurrence(self, day: Day, start_date: date) -> date:
        """Find the first date on or after start_date that falls on the day's weekday."""
        days_ahead = (int(day.weekday) - 1) - start_date.weekday()
        if days_ahead < 0:
            days_ahead += 7

        return start_date + timedelta(days=days_ahead)

    @staticmethod
    def _at_hour(on_date: date, hour: int) -> datetime:
        # Hour 24 is midnight at the end of the day.
        if hour == HOURS_IN_DAY:
            return datetime.combine(on_date + timedelta(days=1), time(0))
        return datetime.combine(on_date, time(hour))

    def transform(
        self,
        timetables: Mapping[str, Timetable],
        start_date: date,
        end_date: date
    ) -> Calendar:
        """Transform busy timetables into iCalendar format.

        Args:
            timetables: Timetables keyed by the name of their owner.
            start_date: First day the weekly periods repeat on.
            end_date: Last day the weekly periods repeat on.

        Returns:
            iCalendar Calendar object.

        Raises:
            ValueError: If start_date is after end_date.
        """
        if start_date > end_date:
            raise ValueError("Start date must not be after end date.")

        self._calendar = Calendar()
        self._calendar.add("prodid", self.PRODID)
        self._calendar.add("version", "2.0")
        self._calendar.add("calscale", "GREGORIAN")
        self._calendar.add("method", "PUBLISH")
        self._calendar.add("x-wr-calname", self._calendar_name)

        for owner, timetable in timetables.items():
            for day in timetable.days:
                first_date = self._find_first_occurrence(day, start_date)
                if first_date > end_date:
                    continue

                for period in day.periods:
                    ical_event = Event()
                    start_datetime = self._at_hour(first_date, period.start)
                    end_datetime = self._at_hour(first_date, period.end)

                    ical_event.add("uid", self._generate_uid(owner, day, period, start_date))
                    ical_event.add("dtstart", start_datetime)
                    ical_event.add("dtend", end_datetime)
                    ical_event.add("dtstamp", datetime.now())

                    # Summary format: Alice (Lecture), or just Alice for unnamed periods
                    if period.name and period.name != DEFAULT_PERIOD_NAME:
                        summary = f"{owner} ({period.name})"
                    else:
                        summary = owner
                    ical_event.add("summary", summary)
                    ical_event.add("transp", "OPAQUE")

                    until_datetime = datetime.combine(end_date, time(23, 59, 59))
                    ical_event.add("rrule", vRecur({
                        "freq": "weekly",
                        "until": until_datetime
                    }))

                    self._calendar.add_component(ical_event)

        return self._calendar

    def save(self, output_path: str) -> None:
        """Save the calendar to an .ics file.

        Args:
            output_path: Path to the output file.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._calendar is None:
            raise RuntimeError("No calendar data. Call transform() first.")

        with open(output_path, "wb") as f:
            f.write(self._calendar.to_ical())
