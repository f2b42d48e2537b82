import os

from src.timesheet_engine.timesheet_engine.core.constants import (
    DEFAULT_EARLY_LEAVE_TIME,
    DEFAULT_GRACE_LATE_DAYS,
    DEFAULT_LATE_MARK_TIME,
    DEFAULT_MIN_FULL_DAY_HOURS,
)


def rule_settings() -> dict:
    """Rule settings as strings, read at call time so a loaded .env is honoured."""
    # Luật chấm công mặc định, ghi đè qua biến môi trường / .env
    return {
        "late_mark_time": os.environ.get("LATE_MARK_TIME", DEFAULT_LATE_MARK_TIME),
        "early_leave_time": os.environ.get("EARLY_LEAVE_TIME", DEFAULT_EARLY_LEAVE_TIME),
        "min_full_day_hours": os.environ.get("MIN_FULL_DAY_HOURS", DEFAULT_MIN_FULL_DAY_HOURS),
        "grace_late_days": os.environ.get("GRACE_LATE_DAYS", DEFAULT_GRACE_LATE_DAYS),
    }
