"""Timesheet Engine package.

Normalizes time-clock exports (grid, daily and raw-entry layouts) into
per-employee attendance statistics. Organized by feature modules (parsers,
attendance, analysis, reports) around a single rule evaluator.
"""
