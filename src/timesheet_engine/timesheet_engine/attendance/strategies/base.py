from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..model import RuleConfig, WorkDay


@dataclass(frozen=True)
class DayDecision:
    is_rest_day: bool = False
    is_present: bool = False
    is_absent: bool = False
    is_half_day: bool = False
    is_late: bool = False
    is_early_leave: bool = False


class DayStrategy(ABC):
    """Strategy Pattern: encapsulate how one kind of day is classified."""

    @abstractmethod
    def decide(self, *, day: WorkDay, rules: RuleConfig) -> DayDecision:
        raise NotImplementedError
