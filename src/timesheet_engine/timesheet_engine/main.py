from __future__ import annotations

import argparse
import importlib
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .common.datetime_utils import format_hours
from .container import build_container
from .core.exceptions import DomainError
from .loaders.file_reader import read_grid
from .reports.service import write_csv

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timesheet-engine",
        description="Analyze a time-clock export (grid, daily or raw entries) into attendance statistics.",
    )
    parser.add_argument("file", help="CSV or Excel timesheet")
    parser.add_argument("--late", help="late mark time, e.g. 11:00")
    parser.add_argument("--early", help="early leave time, e.g. 19:00")
    parser.add_argument("--min-hours", help="minimum hours for a full day")
    parser.add_argument("--grace", help="late marks tolerated before a half-day cut")
    parser.add_argument("--out", help="directory for CSV exports")
    parser.add_argument("--employee", help="also export the daily log of this employee")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = _build_parser().parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rule_settings = dict(getattr(settings, "RULES"))
    overrides = {
        "late_mark_time": args.late,
        "early_leave_time": args.early,
        "min_full_day_hours": args.min_hours,
        "grace_late_days": args.grace,
    }
    rule_settings.update({key: value for key, value in overrides.items() if value is not None})

    try:
        container = build_container(rule_settings=rule_settings)
        grid = read_grid(args.file)
        result = container.analysis_service.analyze(grid, container.rules)
    except DomainError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"Format: {result.format_label}")
    if result.month_period:
        print(f"Period: {result.month_period}")
    if result.notice:
        print(result.notice)

    for emp in result.employees:
        print(
            f"{emp.name:<28} {emp.member_code:<10} present={emp.present_days:<3} full={emp.full_days:<3} "
            f"half={emp.half_days:<3} late={emp.late_marks:<3} absent={emp.absent_days:<3} "
            f"hours={format_hours(emp.total_hours)} [{emp.status}]"
        )

    reports = container.report_service
    overview = reports.build_overview(result.employees)
    print(
        f"{overview.employees} employees, {overview.half_days} half days, {overview.late_marks} late marks, "
        f"{overview.avg_attendance_pct}% average attendance"
    )
    if result.half_day_cuts:
        print(f"{result.half_day_cuts} half-day cuts from late marks")

    out_dir = Path(args.out or getattr(settings, "EXPORT_DIR", "exports"))
    if result.employees:
        path = write_csv(out_dir / reports.summary_filename(date.today()), reports.summary_csv(result.employees))
        print(f"Summary written to {path}")

    if args.employee:
        matches = [emp for emp in result.employees if emp.name.lower() == args.employee.lower()]
        if not matches:
            print(f"Employee not found: {args.employee}", file=sys.stderr)
            return 1
        emp = matches[0]
        path = write_csv(out_dir / reports.employee_filename(emp), reports.employee_csv(emp))
        print(f"Daily log written to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
