from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.app_logger import get_logger
from ..common.validators import require_max_length, require_non_empty
from ..core.constants import DEFAULT_PROFILE, MAX_LENGTHS
from ..core.exceptions import NotFoundError, ValidationError
from .model import StudentProfile
from .repository import StudentRepository

log = get_logger(__name__)

_UPDATABLE = ("name", "roll_number", "course", "semester", "email")


def _check_lengths(student: StudentProfile) -> StudentProfile:
    for field in ("student_id", *_UPDATABLE):
        label = field.replace("_", " ").capitalize()
        require_max_length(getattr(student, field), label, MAX_LENGTHS[field])
    return student


class StudentService:
    """Use cases around the student profile."""

    def __init__(self, students: StudentRepository, attendance: AttendanceRepository):
        self._students = students
        self._attendance = attendance

    def create(
        self,
        *,
        name: str,
        roll_number: str,
        course: str = "",
        semester: str = "",
        email: str = "",
        student_id: Optional[str] = None,
    ) -> StudentProfile:
        student = StudentProfile(
            student_id=str(student_id or "").strip() or uuid.uuid4().hex,
            name=require_non_empty(name, "Name"),
            roll_number=require_non_empty(roll_number, "Roll number"),
            course=str(course or "").strip(),
            semester=str(semester or "").strip(),
            email=str(email or "").strip(),
        )
        _check_lengths(student)

        if self._students.get_by_id(student.student_id):
            raise ValidationError("Student already exists")
        if self._students.get_by_roll_number(student.roll_number):
            raise ValidationError("Roll number already exists")
        if not self._students.create(student):
            raise ValidationError("Roll number already exists")

        log.info("created student %s (%s)", student.student_id, student.roll_number)
        return student

    def get(self, student_id: str) -> StudentProfile:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def update(self, student_id: str, **fields) -> StudentProfile:
        current = self.get(student_id)

        unknown = set(fields) - set(_UPDATABLE)
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

        changes = {k: str(v).strip() for k, v in fields.items() if v is not None}
        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "Name")
        if "roll_number" in changes:
            changes["roll_number"] = require_non_empty(changes["roll_number"], "Roll number")
            other = self._students.get_by_roll_number(changes["roll_number"])
            if other and other.student_id != student_id:
                raise ValidationError("Roll number already exists")

        updated = _check_lengths(replace(current, **changes))
        if not self._students.update(updated):
            raise ValidationError("Roll number already exists")
        return updated

    def list_all(self) -> Sequence[StudentProfile]:
        return self._students.list_all()

    def delete(self, student_id: str) -> None:
        """Delete the student and every attendance record it owns."""
        self.get(student_id)
        removed = self._attendance.delete_for_student(student_id)
        self._students.delete_by_id(student_id)
        log.info("deleted student %s (%d attendance records)", student_id, removed)

    def ensure_default_profile(self, student_id: Optional[str] = None) -> StudentProfile:
        """Return the given profile, or create the default one on first use."""
        if student_id:
            existing = self._students.get_by_id(student_id)
            if existing:
                return existing

        existing = self._students.get_by_roll_number(DEFAULT_PROFILE["roll_number"])
        if existing:
            return existing

        return self.create(student_id=student_id, **DEFAULT_PROFILE)
