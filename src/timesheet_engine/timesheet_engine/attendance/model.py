from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.datetime_utils import format_hours, parse_clock_time
from ..common.validators import require_clock_time, require_non_negative_float, require_non_negative_int
from ..core.constants import (
    DEFAULT_EARLY_LEAVE_TIME,
    DEFAULT_GRACE_LATE_DAYS,
    DEFAULT_LATE_MARK_TIME,
    DEFAULT_MIN_FULL_DAY_HOURS,
    STATUS_ACTIVE,
    STATUS_NO_ATTENDANCE,
)
from ..core.enums import DayStatus
from ..core.exceptions import DomainError


@dataclass(frozen=True)
class WorkDay:
    """Bản ghi ngày chuẩn hoá (canonical) trước khi áp dụng luật chấm công.

    Mọi parser đều quy về cấu trúc này.
    """

    date: str
    day_name: str
    hours: float = 0.0
    first_in: str = ""
    last_out: str = ""
    location: str = ""
    hours_label: Optional[str] = None
    rest_day: bool = False

    @property
    def first_in_minutes(self) -> Optional[int]:
        return parse_clock_time(self.first_in)

    @property
    def last_out_minutes(self) -> Optional[int]:
        return parse_clock_time(self.last_out)


@dataclass(frozen=True)
class DailyRecord:
    """Kết quả phân loại của một nhân viên trong một ngày."""

    date: str
    day_name: str
    hours: float
    hours_label: str
    first_in: str
    last_out: str
    location: str
    is_rest_day: bool
    is_present: bool
    is_absent: bool
    is_half_day: bool
    is_late: bool
    is_early_leave: bool

    @property
    def status(self) -> DayStatus:
        if self.is_rest_day:
            return DayStatus.REST
        if self.is_absent:
            return DayStatus.ABSENT
        if self.is_half_day:
            return DayStatus.HALF_DAY
        if self.is_late:
            return DayStatus.LATE
        return DayStatus.PRESENT


@dataclass
class EmployeeStats:
    """Per-employee accumulator.

    Built empty when the employee is first seen, fed one DailyRecord at a
    time through add_day(), and finalized exactly once.
    """

    name: str
    member_code: str = ""
    daily_records: list[DailyRecord] = field(default_factory=list)
    full_days: int = 0
    half_days: int = 0
    late_marks: int = 0
    early_leaves: int = 0
    absent_days: int = 0
    working_days: int = 0
    present_days: int = 0
    total_hours: float = 0.0
    avg_daily_hours: float = 0.0
    status: str = STATUS_ACTIVE
    total_from_file: str = ""
    half_day_cuts: int = 0
    finalized: bool = field(default=False, repr=False)

    def add_day(self, record: DailyRecord) -> None:
        if self.finalized:
            raise DomainError(f"Stats for {self.name} are already finalized")

        self.daily_records.append(record)
        if not record.is_rest_day:
            self.working_days += 1
        if record.is_absent:
            self.absent_days += 1
        if record.is_present:
            self.present_days += 1
            self.total_hours += record.hours
            if record.is_half_day:
                self.half_days += 1
            else:
                self.full_days += 1
            if record.is_late:
                self.late_marks += 1
            # A half day already covers the shortfall; the flag stays on the record.
            if record.is_early_leave and not record.is_half_day:
                self.early_leaves += 1

    def apply_late_penalty(self, cycle_length: int) -> int:
        """Convert one full day into a half day for every completed grace cycle."""
        cuts = self.late_marks // cycle_length
        self.half_day_cuts = cuts
        self.half_days += cuts
        self.full_days = max(0, self.full_days - cuts)
        return cuts

    def finalize(self) -> "EmployeeStats":
        if self.finalized:
            raise DomainError(f"Stats for {self.name} are already finalized")
        self.avg_daily_hours = self.total_hours / self.present_days if self.present_days > 0 else 0.0
        self.status = STATUS_ACTIVE if self.present_days > 0 else STATUS_NO_ATTENDANCE
        self.finalized = True
        return self

    @property
    def display_total(self) -> str:
        return self.total_from_file or format_hours(self.total_hours)

    @property
    def attendance_rate(self) -> float:
        return self.present_days / max(self.working_days, 1)


@dataclass(frozen=True)
class RuleConfig:
    """Business rules for one analysis run.

    Times are minutes since midnight; a late mark is strictly after
    late_mark_time and an early leave strictly before early_leave_time.
    """

    late_mark_time: int = 11 * 60
    early_leave_time: int = 19 * 60
    min_full_day_hours: float = 7.0
    grace_late_days: int = 3

    @property
    def cycle_length(self) -> int:
        return self.grace_late_days + 1

    @classmethod
    def from_settings(
        cls,
        *,
        late_mark_time: str = DEFAULT_LATE_MARK_TIME,
        early_leave_time: str = DEFAULT_EARLY_LEAVE_TIME,
        min_full_day_hours: str = DEFAULT_MIN_FULL_DAY_HOURS,
        grace_late_days: str = DEFAULT_GRACE_LATE_DAYS,
    ) -> "RuleConfig":
        """Build rules from user-facing strings ("11:00", "7", "3")."""
        return cls(
            late_mark_time=require_clock_time(late_mark_time, "Late mark time"),
            early_leave_time=require_clock_time(early_leave_time, "Early leave time"),
            min_full_day_hours=require_non_negative_float(min_full_day_hours, "Minimum full-day hours"),
            grace_late_days=require_non_negative_int(grace_late_days, "Grace late days"),
        )
