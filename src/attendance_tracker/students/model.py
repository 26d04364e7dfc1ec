from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentProfile:
    """Domain entity: the student who checks in.

    Plain data object, no storage access.
    """

    student_id: str
    name: str
    roll_number: str
    course: str = ""
    semester: str = ""
    email: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "rollNumber": self.roll_number,
            "course": self.course,
            "semester": self.semester,
            "email": self.email,
        }
