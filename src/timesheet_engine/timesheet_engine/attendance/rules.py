"""Shared per-day rule evaluation and per-employee roll-up.

Every layout parser funnels its WorkDay stream through evaluate_day() so the
same thresholds apply regardless of the source format.
"""
from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import format_hours, parse_sheet_date
from .factory import DayStrategyFactory
from .model import DailyRecord, EmployeeStats, RuleConfig, WorkDay

_default_factory = DayStrategyFactory()


def evaluate_day(day: WorkDay, rules: RuleConfig, *, factory: Optional[DayStrategyFactory] = None) -> DailyRecord:
    strategy = (factory or _default_factory).for_day(day)
    decision = strategy.decide(day=day, rules=rules)
    return DailyRecord(
        date=day.date,
        day_name=day.day_name,
        hours=day.hours,
        hours_label=day.hours_label if day.hours_label is not None else format_hours(day.hours),
        first_in=day.first_in,
        last_out=day.last_out,
        location=day.location,
        is_rest_day=decision.is_rest_day,
        is_present=decision.is_present,
        is_absent=decision.is_absent,
        is_half_day=decision.is_half_day,
        is_late=decision.is_late,
        is_early_leave=decision.is_early_leave,
    )


def sort_chronologically(days: Iterable[WorkDay]) -> list[WorkDay]:
    """Stable chronological sort; days whose label does not parse keep input order at the end."""

    def key(day: WorkDay):
        parsed = parse_sheet_date(day.date)
        return (parsed is None, parsed.toordinal() if parsed else 0)

    return sorted(days, key=key)


def build_employee(
    *,
    name: str,
    member_code: str,
    days: Iterable[WorkDay],
    rules: RuleConfig,
    apply_penalty: bool = True,
    total_from_file: str = "",
    factory: Optional[DayStrategyFactory] = None,
) -> EmployeeStats:
    emp = EmployeeStats(name=name, member_code=member_code, total_from_file=total_from_file)
    for day in days:
        emp.add_day(evaluate_day(day, rules, factory=factory))
    if apply_penalty:
        emp.apply_late_penalty(rules.cycle_length)
    return emp.finalize()
