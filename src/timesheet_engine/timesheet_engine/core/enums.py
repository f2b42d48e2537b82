from __future__ import annotations

from enum import Enum


class FileFormat(str, Enum):
    """Bố cục bảng chấm công được nhận diện."""

    GRID = "monthly_grid"
    DAILY = "monthly_daily"
    RAW_ENTRIES = "raw_entries"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return {
            FileFormat.GRID: "Monthly Timesheet Grid",
            FileFormat.DAILY: "Monthly Raw Timesheet",
            FileFormat.RAW_ENTRIES: "Raw Time Entries",
            FileFormat.UNKNOWN: "Unknown",
        }[self]


class DayStatus(str, Enum):
    """Nhãn hiển thị của một ngày sau khi phân loại."""

    REST = "Rest"
    ABSENT = "Absent"
    HALF_DAY = "Half Day"
    LATE = "Late"
    PRESENT = "Present"


class EntryType(str, Enum):
    """Loại sự kiện trong file raw entries."""

    IN = "In"
    OUT = "Out"
