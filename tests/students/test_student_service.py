from __future__ import annotations

from datetime import datetime

import pytest

from attendance_tracker.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from attendance_tracker.attendance.service import AttendanceService
from attendance_tracker.core.exceptions import NotFoundError, ValidationError
from attendance_tracker.students.memory_student_repository import InMemoryStudentRepository
from attendance_tracker.students.service import StudentService


def _services():
    students = InMemoryStudentRepository()
    attendance = InMemoryAttendanceRepository()
    return StudentService(students, attendance), AttendanceService(attendance, students), attendance


def test_create_generates_id_and_strips_fields():
    svc, _, _ = _services()

    s = svc.create(name="  Ann ", roll_number="R1", course="CS", semester="5th", email="a@x.io")

    assert s.student_id
    assert s.name == "Ann"
    assert svc.get(s.student_id) == s


def test_roll_number_is_unique():
    svc, _, _ = _services()
    svc.create(name="Ann", roll_number="R1")

    with pytest.raises(ValidationError, match="Roll number already exists"):
        svc.create(name="Bob", roll_number="R1")


def test_name_and_roll_number_required():
    svc, _, _ = _services()

    with pytest.raises(ValidationError):
        svc.create(name="", roll_number="R1")
    with pytest.raises(ValidationError):
        svc.create(name="Ann", roll_number="  ")


def test_update_keeps_id_and_checks_roll_number():
    svc, _, _ = _services()
    a = svc.create(name="Ann", roll_number="R1", student_id="a")
    svc.create(name="Bob", roll_number="R2", student_id="b")

    updated = svc.update("a", name="Anna", semester="6th")
    assert updated.student_id == "a"
    assert (updated.name, updated.semester, updated.roll_number) == ("Anna", "6th", a.roll_number)

    with pytest.raises(ValidationError):
        svc.update("a", roll_number="R2")
    with pytest.raises(ValidationError):
        svc.update("a", nickname="x")
    with pytest.raises(NotFoundError):
        svc.update("missing", name="X")


def test_fields_longer_than_columns_are_rejected():
    svc, _, _ = _services()

    with pytest.raises(ValidationError, match="Name"):
        svc.create(name="A" * 151, roll_number="R1")
    with pytest.raises(ValidationError, match="Roll number"):
        svc.create(name="Ann", roll_number="R" * 51)

    svc.create(name="Ann", roll_number="R1", student_id="a")
    with pytest.raises(ValidationError, match="Email"):
        svc.update("a", email="a" * 151)
    assert svc.get("a").email == ""


def test_list_all_sorted_by_roll_number():
    svc, _, _ = _services()
    svc.create(name="B", roll_number="R2")
    svc.create(name="A", roll_number="R1")

    assert [s.roll_number for s in svc.list_all()] == ["R1", "R2"]


def test_delete_cascades_attendance():
    svc, ledger, attendance = _services()
    s = svc.create(name="Ann", roll_number="R1")
    ledger.check_in(s.student_id, now=datetime(2026, 2, 2, 8, 0))
    ledger.check_in(s.student_id, now=datetime(2026, 2, 3, 8, 0))

    svc.delete(s.student_id)

    assert attendance.list_for_student(s.student_id) == []
    with pytest.raises(NotFoundError):
        svc.get(s.student_id)


def test_ensure_default_profile_is_idempotent():
    svc, _, _ = _services()

    first = svc.ensure_default_profile()
    second = svc.ensure_default_profile()

    assert first == second
    assert first.roll_number == "STU001"
    assert svc.ensure_default_profile(first.student_id) == first
