from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Sequence

from ..attendance.model import EmployeeStats

SUMMARY_FIELDS = [
    "Name",
    "Code",
    "Present",
    "Full Days",
    "Half Days",
    "Late",
    "Absent",
    "Total Hours",
    "Avg/Day",
]

DAILY_FIELDS = ["Date", "Day", "Clock In", "Clock Out", "Hours", "Status"]

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[list[str]]


@dataclass(frozen=True)
class OverviewTotals:
    """Dashboard totals across every employee of one run."""

    employees: int
    full_days: int
    half_days: int
    late_marks: int
    absent_days: int
    total_hours: float
    avg_attendance_pct: int


class ReportService:
    def build_summary(self, employees: Sequence[EmployeeStats]) -> list[dict]:
        return [
            {
                "Name": emp.name,
                "Code": emp.member_code,
                "Present": emp.present_days,
                "Full Days": emp.full_days,
                "Half Days": emp.half_days,
                "Late": emp.late_marks,
                "Absent": emp.absent_days,
                "Total Hours": f"{emp.total_hours:.1f}",
                "Avg/Day": f"{emp.avg_daily_hours:.1f}",
            }
            for emp in employees
        ]

    def build_employee_log(self, emp: EmployeeStats) -> ReportData:
        rows = [
            {
                "Date": d.date,
                "Day": d.day_name,
                "Clock In": d.first_in or "-",
                "Clock Out": d.last_out or "-",
                "Hours": d.hours_label,
                "Status": d.status.value,
            }
            for d in emp.daily_records
        ]
        summary = [
            ["Total Hours", emp.display_total],
            ["Present", str(emp.present_days)],
            ["Full Days", str(emp.full_days)],
            ["Half Days", str(emp.half_days)],
            ["Late Marks", str(emp.late_marks)],
            ["Absent", str(emp.absent_days)],
        ]
        return ReportData(rows=rows, summary=summary)

    def build_overview(self, employees: Sequence[EmployeeStats]) -> OverviewTotals:
        count = len(employees)
        rate = sum(emp.attendance_rate for emp in employees) / count * 100 if count else 0.0
        return OverviewTotals(
            employees=count,
            full_days=sum(emp.full_days for emp in employees),
            half_days=sum(emp.half_days for emp in employees),
            late_marks=sum(emp.late_marks for emp in employees),
            absent_days=sum(emp.absent_days for emp in employees),
            total_hours=sum(emp.total_hours for emp in employees),
            avg_attendance_pct=int(rate + 0.5),
        )

    def summary_csv(self, employees: Sequence[EmployeeStats]) -> str:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=SUMMARY_FIELDS, lineterminator="\n")
        writer.writeheader()
        for row in self.build_summary(employees):
            writer.writerow(row)
        return out.getvalue()

    def employee_csv(self, emp: EmployeeStats) -> str:
        data = self.build_employee_log(emp)
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=DAILY_FIELDS, lineterminator="\n")
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        plain = csv.writer(out, lineterminator="\n")
        plain.writerow([])
        plain.writerow(["Summary"])
        plain.writerows(data.summary)
        return out.getvalue()

    @staticmethod
    def summary_filename(today: date) -> str:
        return f"attendance_summary_{today.strftime('%Y-%m-%d')}.csv"

    @staticmethod
    def employee_filename(emp: EmployeeStats) -> str:
        return _WHITESPACE_RE.sub("_", emp.name) + "_attendance.csv"


def write_csv(path: Path, text: str) -> Path:
    """Write CSV text with a BOM so spreadsheet apps pick up UTF-8."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8-sig"))
    return path
