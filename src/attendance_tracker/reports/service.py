from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..attendance.model import AttendanceStats
from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_TARGET_PERCENT, SUMMARY_WEEK_DAYS


@dataclass(frozen=True)
class SummaryData:
    stats: AttendanceStats
    monthly: list[dict]
    last_seven_days: list[dict]
    below_threshold: bool

    def to_dict(self) -> dict:
        return {
            "stats": {**self.stats.to_dict(), "percentage": self.stats.attendance_percent},
            "monthly": self.monthly,
            "lastSevenDays": self.last_seven_days,
            "belowThreshold": self.below_threshold,
        }


class AttendanceReportService:
    """Read-side summaries over a student's ledger."""

    def __init__(self, ledger: AttendanceService, *, threshold_percent: float = DEFAULT_TARGET_PERCENT):
        self._ledger = ledger
        self._threshold = float(threshold_percent)

    def build_summary(self, student_id: str, *, today: Optional[date] = None) -> SummaryData:
        today = today or now_local().date()
        records = self._ledger.find_by_student(student_id)
        stats = self._ledger.stats(student_id)

        month_map: dict[str, dict] = {}
        for r in records:
            key = r.work_date.strftime("%Y-%m")
            m = month_map.get(key)
            if not m:
                m = {"month": key, "present": 0, "late": 0, "total": 0}
                month_map[key] = m
            m[r.status.value] += 1
            m["total"] += 1

        monthly = []
        for key in sorted(month_map):
            m = month_map[key]
            m["percentage"] = round((m["present"] + m["late"]) / m["total"] * 100, 1) if m["total"] else 0.0
            monthly.append(m)

        by_date = {r.work_date: r for r in records}
        week = []
        for offset in range(SUMMARY_WEEK_DAYS - 1, -1, -1):
            day = today - timedelta(days=offset)
            r = by_date.get(day)
            week.append(
                {
                    "date": day.strftime("%Y-%m-%d"),
                    "weekday": day.strftime("%a"),
                    # "absent" here is display-only: no record exists for the day.
                    "status": r.status.value if r else "absent",
                }
            )

        below = stats.total > 0 and stats.attendance_percent < self._threshold
        return SummaryData(stats=stats, monthly=monthly, last_seven_days=week, below_threshold=below)
