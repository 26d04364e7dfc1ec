from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def insert_if_absent(self, record: AttendanceRecord) -> bool:
        """Insert unless (student_id, work_date) is taken. True when inserted.

        Must be atomic with respect to the existence check.
        """

        raise NotImplementedError

    def get_for_student_and_date(self, student_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        """All records of a student, newest date first."""

        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> int:
        raise NotImplementedError

    def count_by_status(self, student_id: str) -> dict[AttendanceStatus, int]:
        raise NotImplementedError
