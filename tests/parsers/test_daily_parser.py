import pytest

from src.timesheet_engine.timesheet_engine.attendance.model import RuleConfig
from src.timesheet_engine.timesheet_engine.core.exceptions import HeaderNotFoundError, MissingColumnError
from src.timesheet_engine.timesheet_engine.parsers.daily_parser import DailyLayoutParser

RULES = RuleConfig()
HEADER = ["Day", "Date", "Full Name", "Member Code", "Worked Hours", "First In", "Last Out"]


def _row(day, date, name="A. Rao", code="M-01", hours="9h", first_in="10:00 AM", last_out="7:30 PM"):
    return [day, date, name, code, hours, first_in, last_out]


def _week(name="A. Rao"):
    return [
        _row("Saturday", "2025-11-08", name=name),
        _row("Monday", "2025-11-03", name=name),
        _row("Tuesday", "2025-11-04", name=name, hours="7h 45m", first_in="11:15 AM"),
        _row("Wednesday", "2025-11-05", name=name),
        _row("Sunday", "2025-11-09", name=name, hours="", first_in="", last_out=""),
        _row("Thursday", "2025-11-06", name=name),
        _row("Friday", "2025-11-07", name=name),
    ]


def test_daily_single_late_day_below_grace():
    result = DailyLayoutParser().parse([HEADER] + _week(), RULES)

    emp = result.employees[0]
    assert emp.name == "A. Rao"
    assert emp.member_code == "M-01"
    assert [r.is_late for r in emp.daily_records].count(True) == 1
    assert emp.late_marks == 1
    assert emp.half_days == 0
    assert emp.full_days == 6
    assert emp.half_day_cuts == 0
    assert emp.present_days == 6
    assert emp.working_days == 6
    assert emp.absent_days == 0
    assert emp.total_hours == pytest.approx(52.75)


def test_daily_days_sorted_chronologically():
    emp = DailyLayoutParser().parse([HEADER] + _week(), RULES).employees[0]

    assert [r.date for r in emp.daily_records] == [f"2025-11-0{d}" for d in range(3, 10)]
    assert emp.daily_records[-1].is_rest_day


def test_daily_late_penalty_after_grace_cycle():
    rows = [_row("Monday", f"2025-11-1{d}", first_in="11:30 AM") for d in range(0, 5)]

    emp = DailyLayoutParser().parse([HEADER] + rows, RULES).employees[0]

    assert emp.late_marks == 5
    assert emp.half_day_cuts == 1
    assert emp.half_days == 1
    assert emp.full_days == 4


def test_daily_header_may_follow_a_title_row():
    grid = [["Monthly Raw Timesheet"], HEADER, _row("Monday", "2025-11-03")]

    assert len(DailyLayoutParser().parse(grid, RULES).employees) == 1


def test_daily_groups_by_name_only_and_keeps_first_code():
    grid = [
        HEADER,
        _row("Monday", "2025-11-03", code="M-01"),
        _row("Tuesday", "2025-11-04", code="M-99"),
        _row("Monday", "2025-11-03", name="B. Shah", code="M-02"),
    ]

    employees = DailyLayoutParser().parse(grid, RULES).employees

    assert [(e.name, e.member_code) for e in employees] == [("A. Rao", "M-01"), ("B. Shah", "M-02")]
    assert employees[0].present_days == 2


def test_daily_repeated_date_replaces_earlier_row():
    grid = [
        HEADER,
        _row("Monday", "2025-11-03", hours="4h"),
        _row("Monday", "2025-11-03", hours="9h"),
    ]

    emp = DailyLayoutParser().parse(grid, RULES).employees[0]

    assert len(emp.daily_records) == 1
    assert emp.daily_records[0].hours == 9


def test_daily_skips_rows_without_name_or_date_and_short_rows():
    grid = [
        HEADER,
        _row("Monday", "", name="A. Rao"),
        _row("Monday", "2025-11-03", name=""),
        ["Monday", "2025-11-03"],
        _row("Monday", "2025-11-03", name="B. Shah"),
    ]

    employees = DailyLayoutParser().parse(grid, RULES).employees

    assert [e.name for e in employees] == ["B. Shah"]


def test_daily_absent_and_early_leave_on_half_day():
    grid = [
        HEADER,
        _row("Monday", "2025-11-03", hours="", first_in="", last_out=""),
        _row("Tuesday", "2025-11-04", hours="5h", first_in="10:00 AM", last_out="3:00 PM"),
    ]

    emp = DailyLayoutParser().parse(grid, RULES).employees[0]
    absent, half = emp.daily_records

    assert absent.is_absent and absent.hours == 0
    assert half.is_half_day and half.is_early_leave
    assert emp.early_leaves == 0
    assert emp.absent_days == 1


def test_daily_missing_full_name_column():
    grid = [["Day", "Date", "Employee", "Worked Hours"], ["Monday", "2025-11-03", "A", "9h"]]

    with pytest.raises(MissingColumnError) as exc:
        DailyLayoutParser().parse(grid, RULES)
    assert exc.value.column == "Full Name"


def test_daily_header_not_found():
    grid = [["x"]] * 5 + [HEADER]

    with pytest.raises(HeaderNotFoundError):
        DailyLayoutParser().parse(grid, RULES)


def test_daily_parse_is_repeatable():
    grid = [HEADER] + _week() + _week(name="B. Shah")

    first = DailyLayoutParser().parse(grid, RULES)
    second = DailyLayoutParser().parse(grid, RULES)

    assert first == second


def test_daily_short_sun_label_is_not_a_rest_day():
    grid = [HEADER, _row("Sun", "2025-11-09", hours="", first_in="", last_out="")]

    emp = DailyLayoutParser().parse(grid, RULES).employees[0]
    record = emp.daily_records[0]

    assert not record.is_rest_day
    assert record.is_absent
    assert emp.working_days == 1
    assert emp.absent_days == 1
