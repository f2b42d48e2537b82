import os

from src.timesheet_engine.timesheet_engine.core.constants import (
    DEFAULT_EARLY_LEAVE_TIME,
    DEFAULT_GRACE_LATE_DAYS,
    DEFAULT_LATE_MARK_TIME,
    DEFAULT_MIN_FULL_DAY_HOURS,
)

# Giá trị cố định để test không phụ thuộc vào .env của máy
RULES = {
    "late_mark_time": DEFAULT_LATE_MARK_TIME,
    "early_leave_time": DEFAULT_EARLY_LEAVE_TIME,
    "min_full_day_hours": DEFAULT_MIN_FULL_DAY_HOURS,
    "grace_late_days": DEFAULT_GRACE_LATE_DAYS,
}

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

LOG_LEVEL = "INFO"
