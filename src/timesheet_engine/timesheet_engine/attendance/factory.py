from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import REST_DAY_NAME
from .model import WorkDay
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayStrategy
from .strategies.present_strategy import PresentStrategy
from .strategies.rest_strategy import RestDayStrategy


def is_rest_day_name(day_name: str) -> bool:
    return (day_name or "").strip().lower() == REST_DAY_NAME


@dataclass
class DayStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the day's facts."""

    def for_day(self, day: WorkDay) -> DayStrategy:
        if day.rest_day or is_rest_day_name(day.day_name):
            return RestDayStrategy()
        if day.hours > 0 or day.first_in_minutes is not None:
            return PresentStrategy()
        return AbsentStrategy()
