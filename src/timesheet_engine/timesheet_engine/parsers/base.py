from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..attendance.factory import DayStrategyFactory
from ..attendance.model import EmployeeStats, RuleConfig
from ..core.enums import FileFormat

RawGrid = Sequence[Sequence[str]]


def cell(row: Sequence[str], idx: int) -> str:
    """Return the stripped text of row[idx], or "" when the column is missing."""
    if idx < 0 or idx >= len(row):
        return ""
    value = row[idx]
    return "" if value is None else str(value).strip()


def column_index(header: Sequence[str], name: str) -> int:
    for idx, value in enumerate(header):
        if value == name:
            return idx
    return -1


@dataclass(frozen=True)
class ParseResult:
    employees: list[EmployeeStats] = field(default_factory=list)
    month_period: str = ""


class LayoutParser(ABC):
    """One layout variant; all variants emit WorkDays into the shared rule evaluator."""

    file_format: FileFormat = FileFormat.UNKNOWN

    def __init__(self, *, factory: Optional[DayStrategyFactory] = None):
        self._factory = factory or DayStrategyFactory()

    @abstractmethod
    def parse(self, grid: RawGrid, rules: RuleConfig) -> ParseResult:
        raise NotImplementedError
