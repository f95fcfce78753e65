from icalendar import Calendar

import slots


def test_finds_common_slots(capsys):
    exit_code = slots.main([
        "-t", "alice=mon: 8-13 tue: 8-13 wed: 8-22 thu: 8-22 fri: 8-22",
        "-t", "bob=mon: 8-13 tue: 8-13 wed: 8-22 thu: 8-22 fri: 8-22",
        "-d", "9",
    ])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("Found a few slots, they are displayed below.\n\nAvailable Slots:\n")
    assert "For MONDAY, schedule is:\nPeriod: (13:00 to 22:00)\n" in out
    assert "For TUESDAY, schedule is:\nPeriod: (13:00 to 22:00)\n" in out
    assert "WEDNESDAY" not in out


def test_timeframe_and_days(capsys):
    exit_code = slots.main([
        "-t", "mon: 13-15, 16-18", "-d", "1", "-p", "12-18", "--days", "mon",
    ])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Period: (12:00 to 13:00)\nPeriod: (15:00 to 16:00)\n" in out
    assert "TUESDAY" not in out


def test_no_slots_found(capsys):
    exit_code = slots.main(["-t", "mon: 13-15, 16-18", "-d", "4", "-p", "12-18", "--days", "mon"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "No slots found."


def test_seven_days(capsys):
    exit_code = slots.main(["-t", "sun: 8-21", "-d", "1", "--days", "sun", "--seven-days"])

    assert exit_code == 0
    assert "For SUNDAY, schedule is:\nPeriod: (21:00 to 22:00)\n" in capsys.readouterr().out


def test_seven_days_from_env(capsys, monkeypatch):
    monkeypatch.setenv("TIMETABLE_SEVEN_DAYS", "1")

    assert slots.main(["-t", "sat: 8-21", "-d", "1", "--days", "sat"]) == 0
    assert "SATURDAY" in capsys.readouterr().out


def test_invalid_input_reports_error(capsys):
    assert slots.main(["-t", "mon: 13-15, 14-16", "-d", "1"]) == 1
    assert capsys.readouterr().err.startswith("Error: Period overlaps")

    assert slots.main(["-t", "mon: 13-15", "-d", "0"]) == 1
    assert "Duration" in capsys.readouterr().err

    assert slots.main(["-t", "sat: 13-15", "-d", "1"]) == 1
    assert "Error:" in capsys.readouterr().err

    assert slots.main(["-t", "mon: 13-15", "-d", "1", "--days", "someday"]) == 1
    assert "Unknown day" in capsys.readouterr().err


def test_ical_output(tmp_path, capsys):
    output = tmp_path / "busy"

    exit_code = slots.main([
        "-t", "alice=mon: 13-15", "-t", "wed: 8-9", "-d", "1",
        "--ical-output", str(output), "--start-date", "2026-02-23", "--end-date", "2026-06-30",
    ])

    assert exit_code == 0
    assert "Timetables saved to:" in capsys.readouterr().out
    calendar = Calendar.from_ical((tmp_path / "busy.ics").read_bytes())
    summaries = sorted(str(event["summary"]) for event in calendar.walk("VEVENT"))
    assert summaries == ["alice", "person-2"]


def test_parse_named_timetable():
    assert slots.parse_named_timetable("alice=mon: 8-9", 1) == ("alice", "mon: 8-9")
    assert slots.parse_named_timetable("mon: 8-9", 3) == ("person-3", "mon: 8-9")
    assert slots.parse_named_timetable(" =mon: 8-9", 2) == ("person-2", "mon: 8-9")
