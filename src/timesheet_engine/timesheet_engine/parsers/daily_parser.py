"""Long "Monthly Raw Timesheet": one row per employee per day with First In / Last Out."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..attendance.model import EmployeeStats, RuleConfig, WorkDay
from ..attendance.rules import build_employee, sort_chronologically
from ..common.datetime_utils import parse_duration
from ..core.constants import DAILY_HEADER_SCAN_ROWS
from ..core.enums import FileFormat
from ..core.exceptions import HeaderNotFoundError, MissingColumnError
from .base import LayoutParser, ParseResult, RawGrid, cell, column_index

logger = logging.getLogger(__name__)


@dataclass
class _EmployeeDays:
    member_code: str
    days: dict[str, WorkDay] = field(default_factory=dict)


class DailyLayoutParser(LayoutParser):
    file_format = FileFormat.DAILY

    def parse(self, grid: RawGrid, rules: RuleConfig) -> ParseResult:
        header_idx = self._find_header(grid)
        header = grid[header_idx]

        name_idx = column_index(header, "Full Name")
        if name_idx == -1:
            logger.warning("Daily layout: Full Name column missing")
            raise MissingColumnError("Full Name")
        code_idx = column_index(header, "Member Code")
        date_idx = column_index(header, "Date")
        day_idx = column_index(header, "Day")
        worked_idx = column_index(header, "Worked Hours")
        first_in_idx = column_index(header, "First In")
        last_out_idx = column_index(header, "Last Out")

        # Keyed by name only: two people sharing a name are merged.
        by_name: dict[str, _EmployeeDays] = {}
        skipped = 0
        for row in grid[header_idx + 1 :]:
            if not row or len(row) < 3:
                continue
            name = cell(row, name_idx)
            date = cell(row, date_idx)
            if not name or not date:
                skipped += 1
                continue

            bucket = by_name.setdefault(name, _EmployeeDays(member_code=cell(row, code_idx)))
            # A repeated date replaces the earlier row but keeps its position.
            bucket.days[date] = WorkDay(
                date=date,
                day_name=cell(row, day_idx),
                hours=parse_duration(cell(row, worked_idx)),
                first_in=cell(row, first_in_idx),
                last_out=cell(row, last_out_idx),
            )

        if skipped:
            logger.debug("Daily layout: skipped %s rows without name or date", skipped)

        employees: list[EmployeeStats] = [
            build_employee(
                name=name,
                member_code=bucket.member_code,
                days=sort_chronologically(bucket.days.values()),
                rules=rules,
                factory=self._factory,
            )
            for name, bucket in by_name.items()
        ]
        logger.info("Daily layout: %s employees", len(employees))
        return ParseResult(employees=employees)

    @staticmethod
    def _find_header(grid: RawGrid) -> int:
        for idx, row in enumerate(grid[:DAILY_HEADER_SCAN_ROWS]):
            if row and cell(row, 0) == "Day" and cell(row, 1) == "Date":
                return idx
        logger.warning("Daily layout: Day/Date header not found in the first %s rows", DAILY_HEADER_SCAN_ROWS)
        raise HeaderNotFoundError("Header not found")
