#!/usr/bin/env python3
"""Common free slot finder.

Reads the weekly busy timetables of several people, finds the slots in
which all of them are free, and optionally exports the timetables to an
iCalendar (.ics) file.
"""

import argparse
import sys
from datetime import date, datetime, timedelta
from typing import Optional

from timetable import (
    Period,
    TimetableConfig,
    find_common_slots,
    parse_days,
    parse_timetable,
)
from timetable.logger import setup_logging
from transformer import ICalTransformer


MESSAGE_FOUND_SLOTS_SUCCESS = "Found a few slots, they are displayed below.\n\n{}"
MESSAGE_NO_SLOTS_FOUND = "No slots found."
DEFAULT_EXPORT_WEEKS = 16


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: '{date_str}'. Expected YYYY-MM-DD."
        )


def parse_named_timetable(argument: str, index: int) -> tuple[str, str]:
    """Split a "[name=]timetable" argument into its name and timetable text.

    Unnamed timetables are called "person-N", counting from 1.
    """
    name, separator, text = argument.partition("=")
    if not separator:
        return f"person-{index}", argument
    return name.strip() or f"person-{index}", text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find common free slots in weekly timetables.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 slots.py -t "mon: 13-15, 16-18 tue: 8-10" -t "mon: 9-12" -d 2
  python3 slots.py -t "alice=mon: 13-15" -t "bob=wed: 10-12" -d 1 -p 10-18 --days mon,wed
  python3 slots.py -t "alice=mon: 13-15" -d 1 --ical-output busy.ics --start-date 2026-02-23
        """
    )

    parser.add_argument(
        "-t", "--timetable",
        action="append",
        required=True,
        help='Busy timetable of one person, e.g. "alice=mon: 13-15, 16-18 thu: 11-13". '
             "Repeat for each person."
    )

    parser.add_argument(
        "-d", "--duration",
        type=int,
        required=True,
        help="Length of the slot to find, in hours (1-24)"
    )

    parser.add_argument(
        "-p", "--period",
        default=None,
        help="Daily timeframe to search in, e.g. 10-18 (default: 8-22)"
    )

    parser.add_argument(
        "--days",
        default=None,
        help="Comma-separated days to search, e.g. mon,tue,fri (default: whole week)"
    )

    parser.add_argument(
        "--seven-days",
        action="store_true",
        default=None,
        help="Track Saturday and Sunday as well (default: TIMETABLE_SEVEN_DAYS or Mon-Fri)"
    )

    parser.add_argument(
        "--ical-output",
        default=None,
        help="Also export the busy timetables to this .ics file"
    )

    parser.add_argument(
        "--start-date",
        type=parse_date,
        default=None,
        help="First day of the exported calendar (format: YYYY-MM-DD). Default: today"
    )

    parser.add_argument(
        "--end-date",
        type=parse_date,
        default=None,
        help=f"Last day of the exported calendar (format: YYYY-MM-DD). "
             f"Default: {DEFAULT_EXPORT_WEEKS} weeks after the start date"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file"
    )

    return parser


def load_config(seven_days: Optional[bool]) -> TimetableConfig:
    config = TimetableConfig.from_env()
    if seven_days is None:
        return config
    return TimetableConfig(seven_days=seven_days, day_start=config.day_start, day_end=config.day_end)


def export_ical(timetables: dict, output_path: str, start_date: Optional[date],
                end_date: Optional[date]) -> None:
    if not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"

    start_date = start_date or date.today()
    end_date = end_date or start_date + timedelta(weeks=DEFAULT_EXPORT_WEEKS)
    if start_date >= end_date:
        raise ValueError("Start date must be before end date.")

    transformer = ICalTransformer()
    transformer.transform(timetables, start_date, end_date)
    transformer.save(output_path)
    print(f"Timetables saved to: {output_path}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the slot finder."""
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        config = load_config(args.seven_days)

        timetables = {}
        for index, argument in enumerate(args.timetable, start=1):
            name, text = parse_named_timetable(argument, index)
            timetables[name] = parse_timetable(text, config.days_in_week)

        timeframe = Period.parse(args.period) if args.period else config.default_timeframe
        days = parse_days(args.days, config.days_in_week) if args.days else config.all_days_of_week

        available_slots = find_common_slots(timetables.values(), args.duration, timeframe, days)

        if available_slots.has_common_slots():
            print(MESSAGE_FOUND_SLOTS_SUCCESS.format(available_slots))
        else:
            print(MESSAGE_NO_SLOTS_FOUND)

        if args.ical_output:
            export_ical(timetables, args.ical_output, args.start_date, args.end_date)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: An unexpected error occurred: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
