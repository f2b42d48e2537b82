from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Optional

from ..attendance.model import EmployeeStats, RuleConfig
from ..core.enums import FileFormat
from ..core.exceptions import UnknownFormatError
from ..parsers.base import LayoutParser, RawGrid
from ..parsers.daily_parser import DailyLayoutParser
from ..parsers.detector import detect_format
from ..parsers.grid_parser import GridLayoutParser
from ..parsers.raw_entries_parser import RawEntriesLayoutParser

logger = logging.getLogger(__name__)

_NOTICES = {
    FileFormat.GRID: "Late marks cannot be detected without First In times",
    FileFormat.DAILY: "Monthly Raw Timesheet with First In/Last Out",
}


@dataclass(frozen=True)
class AnalysisResult:
    file_format: FileFormat
    employees: list[EmployeeStats] = field(default_factory=list)
    month_period: str = ""

    @property
    def format_label(self) -> str:
        return self.file_format.label

    @property
    def notice(self) -> str:
        return _NOTICES.get(self.file_format, "")

    @property
    def half_day_cuts(self) -> int:
        return sum(emp.half_day_cuts for emp in self.employees)


def default_parsers() -> dict[FileFormat, LayoutParser]:
    return {
        FileFormat.GRID: GridLayoutParser(),
        FileFormat.DAILY: DailyLayoutParser(),
        FileFormat.RAW_ENTRIES: RawEntriesLayoutParser(),
    }


class TimesheetAnalysisService:
    """Detect the layout of a raw grid and run the matching parser.

    Stateless between runs: the same grid and rules always give equal results.
    """

    def __init__(
        self,
        parsers: Optional[Mapping[FileFormat, LayoutParser]] = None,
        *,
        detector: Callable[[RawGrid], FileFormat] = detect_format,
    ):
        self._parsers = dict(parsers or default_parsers())
        self._detect = detector

    def analyze(self, grid: RawGrid, rules: RuleConfig) -> AnalysisResult:
        file_format = self._detect(grid)
        parser = self._parsers.get(file_format)
        if file_format == FileFormat.UNKNOWN or parser is None:
            raise UnknownFormatError("Could not detect file format. Check the file structure.")

        parsed = parser.parse(grid, rules)
        result = AnalysisResult(
            file_format=file_format,
            employees=parsed.employees,
            month_period=parsed.month_period,
        )
        self._log_result(result)
        return result

    def analyze_entries(self, rows: Iterable[Mapping[str, str]], rules: RuleConfig) -> AnalysisResult:
        """Raw entries already keyed by header name (e.g. from a dict reader)."""
        parser = self._parsers.get(FileFormat.RAW_ENTRIES)
        if not isinstance(parser, RawEntriesLayoutParser):
            raise UnknownFormatError("No raw entries parser configured")
        parsed = parser.parse_rows(rows, rules)
        result = AnalysisResult(file_format=FileFormat.RAW_ENTRIES, employees=parsed.employees)
        self._log_result(result)
        return result

    @staticmethod
    def _log_result(result: AnalysisResult) -> None:
        if not result.employees:
            logger.warning("%s: no employees found in the file", result.format_label)
            return
        logger.info(
            "%s: %s employees, %s half-day cuts from late marks",
            result.format_label,
            len(result.employees),
            result.half_day_cuts,
        )
