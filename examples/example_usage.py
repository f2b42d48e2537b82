"""Ví dụ: dùng service layer trực tiếp (không qua file hay CLI).

Mục tiêu: minh hoạ luồng grid -> detector -> parser -> rules -> báo cáo CSV.
"""

import importlib

from config import get_settings_module

from src.timesheet_engine.timesheet_engine.container import build_container


RAW_ENTRIES = [
    ["Date", "Full Name", "Member Code", "EntryType", "Time", "Duration", "Clock In Location"],
    ["2025-11-03", "A. Rao", "M-01", "In", "10:20 AM", "8h 15m", "Gate 2"],
    ["2025-11-03", "A. Rao", "M-01", "In", "10:05 AM", "8h", "Gate 1"],
    ["2025-11-03", "A. Rao", "M-01", "Out", "7:10 PM", "", ""],
    ["2025-11-04", "A. Rao", "M-01", "In", "11:40 AM", "6h", "Gate 1"],
    ["2025-11-04", "A. Rao", "M-01", "Out", "5:45 PM", "", ""],
]


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(rule_settings=settings.RULES)

    result = container.analysis_service.analyze(RAW_ENTRIES, container.rules)
    print(result.format_label)
    print(container.report_service.summary_csv(result.employees))
    print(container.report_service.employee_csv(result.employees[0]))


if __name__ == "__main__":
    main()
