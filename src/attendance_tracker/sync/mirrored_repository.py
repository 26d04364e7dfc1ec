from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence, TypeVar

from ..attendance.memory_attendance_repository import InMemoryAttendanceRepository
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus
from ..core.exceptions import StorageUnavailableError
from ..students.memory_student_repository import InMemoryStudentRepository
from ..students.model import StudentProfile
from ..students.repository import StudentRepository
from .mode import StorageMode

T = TypeVar("T")


class _Mirrored:
    def __init__(self, mode: StorageMode):
        self._mode = mode

    def _run(self, primary_op: Callable[[], T], mirror_op: Callable[[], T], *, after: Callable[[T], None] | None = None) -> T:
        """Primary first; on StorageUnavailableError flip to degraded and use the mirror."""
        if not self._mode.degraded:
            try:
                result = primary_op()
            except StorageUnavailableError as exc:
                self._mode.enter_degraded(str(exc))
            else:
                if after is not None:
                    after(result)
                return result
        return mirror_op()


class MirroredAttendanceRepository(_Mirrored, AttendanceRepository):
    """Primary store plus local mirror behind the AttendanceRepository interface."""

    def __init__(self, primary: AttendanceRepository, mirror: InMemoryAttendanceRepository, mode: StorageMode):
        super().__init__(mode)
        self._primary = primary
        self._mirror = mirror

    def insert_if_absent(self, record: AttendanceRecord) -> bool:
        def mirror_after(inserted: bool) -> None:
            if inserted:
                self._mirror.put(record)

        return self._run(
            lambda: self._primary.insert_if_absent(record),
            lambda: self._mirror.insert_if_absent(record),
            after=mirror_after,
        )

    def get_for_student_and_date(self, student_id: str, work_date: date) -> Optional[AttendanceRecord]:
        def refresh(found: Optional[AttendanceRecord]) -> None:
            if found:
                self._mirror.put(found)

        return self._run(
            lambda: self._primary.get_for_student_and_date(student_id, work_date),
            lambda: self._mirror.get_for_student_and_date(student_id, work_date),
            after=refresh,
        )

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._run(
            lambda: self._primary.get_by_id(record_id),
            lambda: self._mirror.get_by_id(record_id),
        )

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        return self._run(
            lambda: self._primary.list_for_student(student_id),
            lambda: self._mirror.list_for_student(student_id),
            after=lambda records: self._mirror.replace_for_student(student_id, records),
        )

    def delete_by_id(self, record_id: str) -> bool:
        return self._run(
            lambda: self._primary.delete_by_id(record_id),
            lambda: self._mirror.delete_by_id(record_id),
            after=lambda _: self._mirror.delete_by_id(record_id),
        )

    def delete_for_student(self, student_id: str) -> int:
        return self._run(
            lambda: self._primary.delete_for_student(student_id),
            lambda: self._mirror.delete_for_student(student_id),
            after=lambda _: self._mirror.delete_for_student(student_id),
        )

    def count_by_status(self, student_id: str) -> dict[AttendanceStatus, int]:
        return self._run(
            lambda: self._primary.count_by_status(student_id),
            lambda: self._mirror.count_by_status(student_id),
        )


class MirroredStudentRepository(_Mirrored, StudentRepository):
    def __init__(self, primary: StudentRepository, mirror: InMemoryStudentRepository, mode: StorageMode):
        super().__init__(mode)
        self._primary = primary
        self._mirror = mirror

    def _remember(self, student: Optional[StudentProfile]) -> None:
        if student:
            self._mirror.put(student)

    def get_by_id(self, student_id: str) -> Optional[StudentProfile]:
        return self._run(
            lambda: self._primary.get_by_id(student_id),
            lambda: self._mirror.get_by_id(student_id),
            after=self._remember,
        )

    def get_by_roll_number(self, roll_number: str) -> Optional[StudentProfile]:
        return self._run(
            lambda: self._primary.get_by_roll_number(roll_number),
            lambda: self._mirror.get_by_roll_number(roll_number),
            after=self._remember,
        )

    def create(self, student: StudentProfile) -> bool:
        return self._run(
            lambda: self._primary.create(student),
            lambda: self._mirror.create(student),
            after=lambda ok: self._remember(student if ok else None),
        )

    def update(self, student: StudentProfile) -> bool:
        return self._run(
            lambda: self._primary.update(student),
            lambda: self._mirror.update(student),
            after=lambda ok: self._remember(student if ok else None),
        )

    def delete_by_id(self, student_id: str) -> bool:
        return self._run(
            lambda: self._primary.delete_by_id(student_id),
            lambda: self._mirror.delete_by_id(student_id),
            after=lambda _: self._mirror.delete_by_id(student_id),
        )

    def list_all(self) -> Sequence[StudentProfile]:
        def refresh(students: Sequence[StudentProfile]) -> None:
            for s in students:
                self._mirror.put(s)

        return self._run(self._primary.list_all, self._mirror.list_all, after=refresh)
