from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import StudentProfile


class StudentRepository(Protocol):
    """Repository interface for StudentProfile.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, student_id: str) -> Optional[StudentProfile]:
        raise NotImplementedError

    def get_by_roll_number(self, roll_number: str) -> Optional[StudentProfile]:
        raise NotImplementedError

    def create(self, student: StudentProfile) -> bool:
        """Insert; False when the id or roll number is already taken."""

        raise NotImplementedError

    def update(self, student: StudentProfile) -> bool:
        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[StudentProfile]:
        raise NotImplementedError
