from __future__ import annotations

import threading
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Process-local store keyed by (student_id, date); used as the mirror and in tests."""

    def __init__(self):
        self._by_student_date: dict[tuple[str, date], AttendanceRecord] = {}
        self._lock = threading.Lock()

    def insert_if_absent(self, record: AttendanceRecord) -> bool:
        key = (record.student_id, record.work_date)
        with self._lock:
            if key in self._by_student_date:
                return False
            self._by_student_date[key] = record
            return True

    def get_for_student_and_date(self, student_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_student_date.get((student_id, work_date))

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        for r in list(self._by_student_date.values()):
            if r.record_id == record_id:
                return r
        return None

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        items = [r for r in list(self._by_student_date.values()) if r.student_id == student_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items

    def delete_by_id(self, record_id: str) -> bool:
        with self._lock:
            for key, r in list(self._by_student_date.items()):
                if r.record_id == record_id:
                    del self._by_student_date[key]
                    return True
            return False

    def delete_for_student(self, student_id: str) -> int:
        with self._lock:
            keys = [k for k in self._by_student_date if k[0] == student_id]
            for k in keys:
                del self._by_student_date[k]
            return len(keys)

    def count_by_status(self, student_id: str) -> dict[AttendanceStatus, int]:
        counts = {s: 0 for s in AttendanceStatus}
        for r in self.list_for_student(student_id):
            counts[r.status] += 1
        return counts

    def replace_for_student(self, student_id: str, records: Sequence[AttendanceRecord]) -> None:
        """Overwrite a student's records with a fresh copy from the primary store."""
        with self._lock:
            for k in [k for k in self._by_student_date if k[0] == student_id]:
                del self._by_student_date[k]
            for r in records:
                self._by_student_date[(r.student_id, r.work_date)] = r

    def put(self, record: AttendanceRecord) -> None:
        with self._lock:
            self._by_student_date[(record.student_id, record.work_date)] = record
