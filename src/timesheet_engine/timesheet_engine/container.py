from __future__ import annotations

from dataclasses import dataclass

from .analysis.service import TimesheetAnalysisService
from .attendance.factory import DayStrategyFactory
from .attendance.model import RuleConfig
from .core.enums import FileFormat
from .parsers.daily_parser import DailyLayoutParser
from .parsers.grid_parser import GridLayoutParser
from .parsers.raw_entries_parser import RawEntriesLayoutParser
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    rules: RuleConfig

    grid_parser: GridLayoutParser
    daily_parser: DailyLayoutParser
    raw_entries_parser: RawEntriesLayoutParser

    analysis_service: TimesheetAnalysisService
    report_service: ReportService


def build_container(*, rule_settings: dict) -> Container:
    rules = RuleConfig.from_settings(
        late_mark_time=str(rule_settings["late_mark_time"]),
        early_leave_time=str(rule_settings["early_leave_time"]),
        min_full_day_hours=str(rule_settings["min_full_day_hours"]),
        grace_late_days=str(rule_settings["grace_late_days"]),
    )
    factory = DayStrategyFactory()

    grid_parser = GridLayoutParser(factory=factory)
    daily_parser = DailyLayoutParser(factory=factory)
    raw_entries_parser = RawEntriesLayoutParser(factory=factory)

    analysis_service = TimesheetAnalysisService(
        {
            FileFormat.GRID: grid_parser,
            FileFormat.DAILY: daily_parser,
            FileFormat.RAW_ENTRIES: raw_entries_parser,
        }
    )
    report_service = ReportService()

    return Container(
        rules=rules,
        grid_parser=grid_parser,
        daily_parser=daily_parser,
        raw_entries_parser=raw_entries_parser,
        analysis_service=analysis_service,
        report_service=report_service,
    )
