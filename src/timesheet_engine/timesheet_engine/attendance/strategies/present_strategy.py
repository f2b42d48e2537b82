from __future__ import annotations

from ..model import RuleConfig, WorkDay
from .base import DayDecision, DayStrategy


class PresentStrategy(DayStrategy):
    """Worked day. Lateness and half-day are independent axes: only hours decide full/half."""

    def decide(self, *, day: WorkDay, rules: RuleConfig) -> DayDecision:
        first_in = day.first_in_minutes
        last_out = day.last_out_minutes

        is_late = first_in is not None and first_in > rules.late_mark_time
        is_early_leave = last_out is not None and 0 < last_out < rules.early_leave_time
        is_half_day = 0 < day.hours < rules.min_full_day_hours

        return DayDecision(
            is_present=True,
            is_half_day=is_half_day,
            is_late=is_late,
            is_early_leave=is_early_leave,
        )
