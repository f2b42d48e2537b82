"""Wide "Monthly Timesheet" grid: one payroll row per employee, one column per date.

    Month      | November 2025
    ...        | Sat    | Sun    | Mon ...
    NAME | MEMBER CODE | TYPE | November 01 | November 02 | ... | TOTALS
    A. Rao | M-01 | Payroll | 9h 5m | | ... | 180h

The grid carries no clock times, so late and early-leave marks never appear
and the late-mark penalty does not apply.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from ..attendance.model import EmployeeStats, RuleConfig, WorkDay
from ..attendance.rules import build_employee
from ..common.datetime_utils import parse_duration
from ..core.constants import (
    GRID_HEADER_SCAN_ROWS,
    GRID_REST_DAY_NAMES,
    GRID_MONTH_SCAN_ROWS,
    GRID_SUMMARY_TYPES,
    GRID_TOTALS_HEADER,
    MAX_GRID_HOURS,
)
from ..core.enums import FileFormat
from ..core.exceptions import HeaderNotFoundError
from .base import LayoutParser, ParseResult, RawGrid, cell

logger = logging.getLogger(__name__)

_MONTH_RE = re.compile(
    r"\b(jan(uary)?|feb(ruary)?|mar(ch)?|apr(il)?|may|june?|july?|aug(ust)?"
    r"|sep(t(ember)?)?|oct(ober)?|nov(ember)?|dec(ember)?)\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DateColumn:
    idx: int
    date: str
    day: str


class GridLayoutParser(LayoutParser):
    file_format = FileFormat.GRID

    def parse(self, grid: RawGrid, rules: RuleConfig) -> ParseResult:
        header_idx = self._find_header(grid)
        header = grid[header_idx]
        day_names = grid[header_idx - 1] if header_idx > 0 else []
        date_columns, totals_idx = self._date_columns(header, day_names)

        employees: list[EmployeeStats] = []
        for row in grid[header_idx + 1 :]:
            if not row or len(row) < 3:
                continue

            name, code, row_type = cell(row, 0), cell(row, 1), cell(row, 2)
            if not name and not code and row_type in GRID_SUMMARY_TYPES:
                break
            if not name and not code and not row_type:
                continue
            if not name or "payroll" not in row_type.lower():
                continue

            employees.append(
                build_employee(
                    name=name,
                    member_code=code,
                    days=[self._work_day(row, col) for col in date_columns],
                    rules=rules,
                    apply_penalty=False,
                    total_from_file=cell(row, totals_idx) if totals_idx > 0 else "",
                    factory=self._factory,
                )
            )

        logger.info("Grid layout: %s employees over %s date columns", len(employees), len(date_columns))
        return ParseResult(employees=employees, month_period=self.month_period(grid))

    @staticmethod
    def month_period(grid: RawGrid) -> str:
        for row in grid[:GRID_MONTH_SCAN_ROWS]:
            if row and cell(row, 0).lower() == "month" and cell(row, 1):
                return cell(row, 1)
        return ""

    @staticmethod
    def _find_header(grid: RawGrid) -> int:
        for idx, row in enumerate(grid[:GRID_HEADER_SCAN_ROWS]):
            if row and cell(row, 0).upper() == "NAME":
                return idx
        logger.warning("Grid layout: NAME header not found in the first %s rows", GRID_HEADER_SCAN_ROWS)
        raise HeaderNotFoundError("Header not found")

    @staticmethod
    def _date_columns(header: Sequence[str], day_names: Sequence[str]) -> tuple[list[DateColumn], int]:
        columns: list[DateColumn] = []
        for idx in range(3, len(header)):
            value = cell(header, idx)
            if value.upper() == GRID_TOTALS_HEADER:
                return columns, idx
            if _MONTH_RE.search(value):
                columns.append(DateColumn(idx=idx, date=value, day=cell(day_names, idx)))
        return columns, -1

    @staticmethod
    def _work_day(row: Sequence[str], col: DateColumn) -> WorkDay:
        raw = cell(row, col.idx)
        hours = min(parse_duration(raw), MAX_GRID_HOURS)
        return WorkDay(
            date=col.date,
            day_name=col.day,
            hours=hours,
            hours_label=raw or "REST",
            rest_day=raw == "" or col.day.strip().lower() in GRID_REST_DAY_NAMES,
        )
