from src.timesheet_engine.timesheet_engine.attendance.factory import DayStrategyFactory, is_rest_day_name
from src.timesheet_engine.timesheet_engine.attendance.model import WorkDay
from src.timesheet_engine.timesheet_engine.attendance.strategies.absent_strategy import AbsentStrategy
from src.timesheet_engine.timesheet_engine.attendance.strategies.present_strategy import PresentStrategy
from src.timesheet_engine.timesheet_engine.attendance.strategies.rest_strategy import RestDayStrategy


def test_factory_sunday_is_rest_even_with_hours():
    day = WorkDay(date="2025-11-02", day_name="Sunday", hours=9, first_in="10:00 AM")

    strategy = DayStrategyFactory().for_day(day)

    assert isinstance(strategy, RestDayStrategy)


def test_factory_grid_rest_day_is_rest():
    day = WorkDay(date="November 04", day_name="Tue", rest_day=True)

    assert isinstance(DayStrategyFactory().for_day(day), RestDayStrategy)


def test_factory_arrival_without_hours_is_present():
    day = WorkDay(date="2025-11-03", day_name="Monday", first_in="10:00 AM")

    assert isinstance(DayStrategyFactory().for_day(day), PresentStrategy)


def test_factory_unparseable_arrival_is_absent():
    day = WorkDay(date="2025-11-03", day_name="Monday", first_in="-")

    assert isinstance(DayStrategyFactory().for_day(day), AbsentStrategy)


def test_rest_day_names():
    assert is_rest_day_name("Sunday")
    assert not is_rest_day_name("sun")
    assert is_rest_day_name(" SUNDAY ")
    assert not is_rest_day_name("Saturday")
    assert not is_rest_day_name("")


def test_factory_short_sunday_name_without_hours_is_absent():
    day = WorkDay(date="2025-11-09", day_name="Sun")

    assert isinstance(DayStrategyFactory().for_day(day), AbsentStrategy)
