from datetime import datetime

import pytest

from attendance_tracker.attendance.factory import AttendanceStrategyFactory
from attendance_tracker.attendance.strategies.late_strategy import LateStrategy
from attendance_tracker.attendance.strategies.present_strategy import PresentStrategy
from attendance_tracker.core.constants import LATE_CUTOFF_HOUR, NOMINAL_CLASS_START_HOUR
from attendance_tracker.core.enums import AttendanceStatus


def test_factory_checkin_present_before_nominal_start():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 8, 59, 59))

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkin_in_grace_hour_is_present():
    # Classes start at 09:00 but the 09:xx hour is still "present"; lateness begins at 10:00.
    assert NOMINAL_CLASS_START_HOUR == 9
    assert LATE_CUTOFF_HOUR == 10

    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 9, 30))

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkin_late_from_cutoff_hour():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 10, 0))

    assert isinstance(strategy, LateStrategy)
    assert strategy.decide_checkin(now=datetime(2025, 1, 1, 10, 0)).status == AttendanceStatus.LATE


def test_factory_strict_cutoff_is_configurable():
    factory = AttendanceStrategyFactory(late_cutoff_hour=9)

    assert isinstance(factory.for_checkin(now=datetime(2025, 1, 1, 9, 0)), LateStrategy)
    assert isinstance(factory.for_checkin(now=datetime(2025, 1, 1, 8, 59)), PresentStrategy)


def test_factory_rejects_cutoff_out_of_range():
    with pytest.raises(ValueError):
        AttendanceStrategyFactory(late_cutoff_hour=25)
