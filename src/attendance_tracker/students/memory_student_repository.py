from __future__ import annotations

import threading
from typing import Optional, Sequence

from .model import StudentProfile
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    """Process-local store; used as the local mirror and in tests."""

    def __init__(self):
        self._by_id: dict[str, StudentProfile] = {}
        self._lock = threading.Lock()

    def get_by_id(self, student_id: str) -> Optional[StudentProfile]:
        return self._by_id.get(student_id)

    def get_by_roll_number(self, roll_number: str) -> Optional[StudentProfile]:
        for s in self._by_id.values():
            if s.roll_number == roll_number:
                return s
        return None

    def create(self, student: StudentProfile) -> bool:
        with self._lock:
            if student.student_id in self._by_id or self._roll_taken(student):
                return False
            self._by_id[student.student_id] = student
            return True

    def update(self, student: StudentProfile) -> bool:
        with self._lock:
            if student.student_id not in self._by_id or self._roll_taken(student):
                return False
            self._by_id[student.student_id] = student
            return True

    def delete_by_id(self, student_id: str) -> bool:
        with self._lock:
            return self._by_id.pop(student_id, None) is not None

    def list_all(self) -> Sequence[StudentProfile]:
        return sorted(self._by_id.values(), key=lambda s: s.roll_number)

    def put(self, student: StudentProfile) -> None:
        """Upsert without uniqueness checks; used to refresh the mirror."""
        with self._lock:
            self._by_id[student.student_id] = student

    def _roll_taken(self, student: StudentProfile) -> bool:
        return any(
            s.roll_number == student.roll_number and s.student_id != student.student_id
            for s in self._by_id.values()
        )
