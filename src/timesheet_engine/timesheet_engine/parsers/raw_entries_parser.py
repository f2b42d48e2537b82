"""Raw clock-event log: one row per In/Out event, reduced to one WorkDay per employee-date."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from ..attendance.model import EmployeeStats, RuleConfig, WorkDay
from ..attendance.rules import build_employee, sort_chronologically
from ..common.datetime_utils import parse_clock_time, parse_duration, weekday_name
from ..core.enums import EntryType, FileFormat
from ..core.exceptions import MissingColumnError
from .base import LayoutParser, ParseResult, RawGrid, cell

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("Full Name", "Date", "Time", "EntryType")


@dataclass
class _DayBucket:
    date: str
    day_name: str
    first_in: str = ""
    first_in_minutes: Optional[int] = None
    last_out: str = ""
    last_out_minutes: Optional[int] = None
    hours: float = 0.0
    location: str = ""

    def add_in(self, time: str, minutes: Optional[int], duration: str, location: str) -> None:
        if minutes is not None and (self.first_in_minutes is None or minutes < self.first_in_minutes):
            self.first_in = time
            self.first_in_minutes = minutes
            self.location = location
        # Several in/out cycles report overlapping durations; keep the largest, never the sum.
        self.hours = max(self.hours, parse_duration(duration))

    def add_out(self, time: str, minutes: Optional[int]) -> None:
        # A midnight Out (0 minutes) never becomes last_out.
        if minutes is not None and minutes > (self.last_out_minutes or 0):
            self.last_out = time
            self.last_out_minutes = minutes

    def to_work_day(self) -> WorkDay:
        return WorkDay(
            date=self.date,
            day_name=self.day_name,
            hours=self.hours,
            first_in=self.first_in,
            last_out=self.last_out,
            location=self.location,
        )


@dataclass
class _EmployeeBucket:
    name: str
    member_code: str
    days: dict[str, _DayBucket] = field(default_factory=dict)


def _text(row: Mapping[str, str], key: str) -> str:
    value = row.get(key)
    return "" if value is None else str(value).strip()


class RawEntriesLayoutParser(LayoutParser):
    file_format = FileFormat.RAW_ENTRIES

    def parse(self, grid: RawGrid, rules: RuleConfig) -> ParseResult:
        header = [cell(grid[0], idx) for idx in range(len(grid[0]))] if grid else []
        missing = [name for name in REQUIRED_COLUMNS if name not in header]
        if missing:
            logger.warning("Raw entries layout: missing columns %s", ", ".join(missing))
            raise MissingColumnError(missing[0])

        rows = (
            {name: cell(row, idx) for idx, name in enumerate(header) if name}
            for row in grid[1:]
            if row
        )
        return self.parse_rows(rows, rules)

    def parse_rows(self, rows: Iterable[Mapping[str, str]], rules: RuleConfig) -> ParseResult:
        """Parse string-keyed rows (header name -> cell text)."""
        employees_by_key: dict[tuple[str, str], _EmployeeBucket] = {}
        dropped = 0

        for row in rows:
            name = _text(row, "Full Name")
            date = _text(row, "Date")
            if not name or not date:
                dropped += 1
                continue

            code = _text(row, "Member Code")
            emp = employees_by_key.setdefault((name, code), _EmployeeBucket(name=name, member_code=code))
            day = emp.days.get(date)
            if day is None:
                day = emp.days[date] = _DayBucket(date=date, day_name=weekday_name(date))

            time = _text(row, "Time")
            entry_type = _text(row, "EntryType")
            if entry_type == EntryType.IN.value:
                day.add_in(time, parse_clock_time(time), _text(row, "Duration"), _text(row, "Clock In Location"))
            elif entry_type == EntryType.OUT.value:
                day.add_out(time, parse_clock_time(time))

        if dropped:
            logger.debug("Raw entries layout: dropped %s rows without name or date", dropped)

        employees: list[EmployeeStats] = [
            build_employee(
                name=emp.name,
                member_code=emp.member_code,
                days=sort_chronologically(day.to_work_day() for day in emp.days.values()),
                rules=rules,
                factory=self._factory,
            )
            for emp in employees_by_key.values()
        ]
        logger.info("Raw entries layout: %s employees", len(employees))
        return ParseResult(employees=employees)
