from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import parse_clock_time


def require_clock_time(value: str, field_name: str) -> int:
    minutes = parse_clock_time(value)
    if minutes is None:
        raise ValidationError(f"{field_name} is not a valid time: {value!r}")
    return minutes


def require_non_negative_float(value: str, field_name: str) -> float:
    try:
        number = float(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a number: {value!r}") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_non_negative_int(value: str, field_name: str) -> int:
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a whole number: {value!r}") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number
