from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one daily check-in."""

    record_id: str
    student_id: str
    work_date: date
    check_in_time: str
    status: AttendanceStatus
    subject: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "studentId": self.student_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "checkInTime": self.check_in_time,
            "status": self.status.value,
            "subject": self.subject,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    present: int
    late: int

    @property
    def attendance_percent(self) -> float:
        if self.total == 0:
            return 0.0
        return round((self.present + self.late) / self.total * 100, 1)

    def to_dict(self) -> dict:
        return {"total": self.total, "present": self.present, "late": self.late}
