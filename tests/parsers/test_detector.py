from src.timesheet_engine.timesheet_engine.core.enums import FileFormat
from src.timesheet_engine.timesheet_engine.parsers.detector import detect_format


def test_grid_by_title_marker():
    grid = [["Monthly Timesheet - November", ""], ["NAME", "CODE", "KIND"]]

    assert detect_format(grid) == FileFormat.GRID


def test_grid_by_header_triple_case_insensitive():
    grid = [[], ["Name", "Member Code", "type", "November 01"]]

    assert detect_format(grid) == FileFormat.GRID


def test_daily_by_column_set():
    grid = [["Report"], ["Date", "Day", "Full Name", "Member Code", "First In", "Last Out"]]

    assert detect_format(grid) == FileFormat.DAILY


def test_daily_by_leading_columns():
    grid = [["Day", "Date", "Full Name", "Worked Hours"]]

    assert detect_format(grid) == FileFormat.DAILY


def test_raw_entries_by_name_and_entry_type():
    grid = [["Full Name", "Member Code", "Date", "EntryType", "Time"]]

    assert detect_format(grid) == FileFormat.RAW_ENTRIES


def test_raw_entries_by_date_time_entry_type():
    grid = [["Date", "Time", "EntryType", "Employee"]]

    assert detect_format(grid) == FileFormat.RAW_ENTRIES


def test_first_matching_row_wins():
    grid = [
        ["Full Name", "EntryType"],
        ["NAME", "MEMBER CODE", "TYPE"],
    ]

    assert detect_format(grid) == FileFormat.RAW_ENTRIES


def test_grid_checked_before_daily_within_a_row():
    grid = [["Monthly Timesheet", "Day", "Date", "Full Name", "First In"]]

    assert detect_format(grid) == FileFormat.GRID


def test_unknown_when_nothing_matches():
    grid = [["Employee", "Hours"], ["A", "8"]]

    assert detect_format(grid) == FileFormat.UNKNOWN
    assert detect_format([]) == FileFormat.UNKNOWN


def test_only_first_ten_rows_are_scanned():
    grid = [["filler"]] * 10 + [["Day", "Date", "Full Name"]]

    assert detect_format(grid) == FileFormat.UNKNOWN
