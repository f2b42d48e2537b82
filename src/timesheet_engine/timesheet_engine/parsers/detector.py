from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import DETECT_SCAN_ROWS, GRID_TITLE_MARKER
from ..core.enums import FileFormat
from .base import RawGrid, cell

logger = logging.getLogger(__name__)

_DAILY_COLUMNS = {"Day", "Date", "Full Name", "First In"}
_RAW_BY_NAME = {"Full Name", "EntryType"}
_RAW_BY_TIME = {"Date", "Time", "EntryType"}


def _is_grid_row(row: Sequence[str]) -> bool:
    joined = ",".join("" if value is None else str(value) for value in row).lower()
    if GRID_TITLE_MARKER in joined:
        return True
    return (
        cell(row, 0).upper() == "NAME"
        and "MEMBER" in cell(row, 1).upper()
        and cell(row, 2).upper() == "TYPE"
    )


def _is_daily_row(row: Sequence[str], cells: set[str]) -> bool:
    if _DAILY_COLUMNS <= cells:
        return True
    return len(row) >= 3 and list(row[:3]) == ["Day", "Date", "Full Name"]


def _is_raw_entries_row(cells: set[str]) -> bool:
    return _RAW_BY_NAME <= cells or _RAW_BY_TIME <= cells


def detect_format(grid: RawGrid) -> FileFormat:
    """Classify a grid by inspecting its first rows; first match wins."""
    for idx, row in enumerate(grid[:DETECT_SCAN_ROWS]):
        if not row:
            continue
        cells = {str(value) for value in row if value is not None}
        if _is_grid_row(row):
            detected = FileFormat.GRID
        elif _is_daily_row(row, cells):
            detected = FileFormat.DAILY
        elif _is_raw_entries_row(cells):
            detected = FileFormat.RAW_ENTRIES
        else:
            continue
        logger.info("Detected %s layout from row %s", detected.value, idx + 1)
        return detected

    logger.info("No known layout in the first %s rows", DETECT_SCAN_ROWS)
    return FileFormat.UNKNOWN
