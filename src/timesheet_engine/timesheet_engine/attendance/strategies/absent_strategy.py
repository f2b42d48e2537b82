from __future__ import annotations

from ..model import RuleConfig, WorkDay
from .base import DayDecision, DayStrategy


class AbsentStrategy(DayStrategy):
    """Working day with no hours and no recorded arrival."""

    def decide(self, *, day: WorkDay, rules: RuleConfig) -> DayDecision:
        return DayDecision(is_absent=True)
