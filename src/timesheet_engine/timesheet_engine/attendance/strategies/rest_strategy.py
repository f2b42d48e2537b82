from __future__ import annotations

from ..model import RuleConfig, WorkDay
from .base import DayDecision, DayStrategy


class RestDayStrategy(DayStrategy):
    """Rest day: no other flag may be set."""

    def decide(self, *, day: WorkDay, rules: RuleConfig) -> DayDecision:
        return DayDecision(is_rest_day=True)
