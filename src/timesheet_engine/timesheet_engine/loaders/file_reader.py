"""Read CSV / Excel timesheets into a raw grid of text cells."""
from __future__ import annotations

import csv
import logging
import zipfile
from pathlib import Path
from typing import Sequence

import pandas as pd

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".csv", ".xlsx", ".xls")
_SHEET_HINTS = ("timesheet", "raw")


def pick_sheet(sheet_names: Sequence[str]) -> str:
    """Prefer a sheet named like a timesheet or raw export, else the first one."""
    for name in sheet_names:
        if any(hint in name.lower() for hint in _SHEET_HINTS):
            return name
    return sheet_names[0]


def frame_to_grid(frame: pd.DataFrame) -> list[list[str]]:
    frame = frame.fillna("")
    return [["" if value is None else str(value) for value in row] for row in frame.itertuples(index=False)]


def read_grid(path: str | Path) -> list[list[str]]:
    file_path = Path(path)
    ext = file_path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValidationError("Please upload CSV or Excel file")

    try:
        if ext == ".csv":
            grid = _read_csv(file_path)
        else:
            grid = _read_excel(file_path)
    except FileNotFoundError as exc:
        raise ValidationError(f"File not found: {file_path}") from exc
    except UnicodeDecodeError as exc:
        raise ValidationError(f"{file_path.name} is not UTF-8 encoded; re-save it as CSV UTF-8") from exc
    except ImportError as exc:
        raise ValidationError(f"Cannot read {ext} files: {exc}") from exc
    except (OSError, ValueError, zipfile.BadZipFile) as exc:
        raise ValidationError(f"Cannot read {file_path.name}: {exc}") from exc

    logger.info("Loaded %s rows from %s", len(grid), file_path.name)
    return grid


def _read_csv(file_path: Path) -> list[list[str]]:
    # Rows are ragged (title and month rows are short), so no DataFrame here.
    with file_path.open(newline="", encoding="utf-8-sig") as fh:
        return [list(row) for row in csv.reader(fh)]


def _read_excel(file_path: Path) -> list[list[str]]:
    workbook = pd.ExcelFile(file_path)
    sheet = pick_sheet(workbook.sheet_names)
    frame = workbook.parse(sheet, header=None, dtype=str)
    logger.debug("Read sheet %r from %s", sheet, file_path.name)
    return frame_to_grid(frame)
