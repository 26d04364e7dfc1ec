from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Stored check-in status. Absent days have no record at all."""

    PRESENT = "present"
    LATE = "late"
