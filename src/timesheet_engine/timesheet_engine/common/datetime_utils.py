from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as date_parser

_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})(?::(\d{2}))?\s*(AM|PM)?", re.IGNORECASE)
_DURATION_TOKEN_RE = re.compile(r"^(\d+(?:\.\d+)?)([hm])$", re.IGNORECASE)

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Labels without a year ("Nov 03") must order the same way on every run.
_DATE_DEFAULT = datetime(2000, 1, 1)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or str(value).strip() in ("", "-")


def parse_clock_time(value: Optional[str]) -> Optional[int]:
    """Parse "10:45 AM", "22:10" or "9:05:30 pm" into minutes since midnight.

    Returns None for empty cells, "-" and anything that does not look like a
    clock time. Midnight is 0, not None.
    """
    if _is_blank(value):
        return None
    match = _CLOCK_RE.search(str(value))
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = (match.group(4) or "").upper()
    if meridiem == "PM" and hours != 12:
        hours += 12
    elif meridiem == "AM" and hours == 12:
        hours = 0
    return hours * 60 + minutes


def parse_duration(value: Optional[str]) -> float:
    """Parse "8h", "45m" or "8h 30m" into decimal hours. Unknown tokens count as 0."""
    if _is_blank(value):
        return 0.0

    hours = 0.0
    minutes = 0.0
    for token in str(value).split():
        match = _DURATION_TOKEN_RE.match(token)
        if not match:
            continue
        amount = float(match.group(1))
        if match.group(2).lower() == "h":
            hours = amount
        else:
            minutes = amount
    return hours + minutes / 60


def format_hours(hours: float) -> str:
    if hours == 0:
        return "-"
    whole = int(hours)
    minutes = int((hours - whole) * 60 + 0.5)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    return f"{whole}h" if minutes == 0 else f"{whole}h {minutes}m"


def format_clock_time(minutes: int) -> str:
    hours, mins = divmod(int(minutes), 60)
    meridiem = "PM" if hours >= 12 else "AM"
    hour12 = hours - 12 if hours > 12 else (12 if hours == 0 else hours)
    return f"{hour12}:{mins:02d} {meridiem}"


def parse_sheet_date(value: Optional[str]) -> Optional[date]:
    """Best-effort date parse used only for ordering days.

    Note: the date label itself is never rewritten; None means "keep input order".
    """
    if _is_blank(value):
        return None
    try:
        return date_parser.parse(str(value).strip(), default=_DATE_DEFAULT).date()
    except (ValueError, OverflowError):
        return None


def weekday_name(value: Optional[str]) -> str:
    parsed = parse_sheet_date(value)
    if parsed is None:
        return ""
    return _WEEKDAYS[parsed.weekday()]
