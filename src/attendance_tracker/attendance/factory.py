from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import LATE_CUTOFF_HOUR
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the status strategy from the hour of day."""

    late_cutoff_hour: int = LATE_CUTOFF_HOUR

    def __post_init__(self):
        if not 0 <= int(self.late_cutoff_hour) <= 24:
            raise ValueError(f"late_cutoff_hour out of range: {self.late_cutoff_hour!r}")

    def for_checkin(self, *, now: datetime) -> AttendanceStrategy:
        if now.hour < self.late_cutoff_hour:
            return PresentStrategy()
        return LateStrategy()
