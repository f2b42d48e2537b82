"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_MARK_TIME = "11:00"
DEFAULT_EARLY_LEAVE_TIME = "19:00"
DEFAULT_MIN_FULL_DAY_HOURS = "7"
DEFAULT_GRACE_LATE_DAYS = "3"

DETECT_SCAN_ROWS = 10
GRID_HEADER_SCAN_ROWS = 15
GRID_MONTH_SCAN_ROWS = 10
DAILY_HEADER_SCAN_ROWS = 5

MAX_GRID_HOURS = 24.0

GRID_TITLE_MARKER = "monthly timesheet"
GRID_TOTALS_HEADER = "TOTALS"
GRID_SUMMARY_TYPES = frozenset({"Total Hours", "Payroll", "Regular"})

REST_DAY_NAME = "sunday"
GRID_REST_DAY_NAMES = frozenset({"sun", "sunday"})

STATUS_ACTIVE = "Active"
STATUS_NO_ATTENDANCE = "No Attendance"
