from __future__ import annotations

from datetime import date, datetime

from attendance_tracker.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from attendance_tracker.attendance.service import AttendanceService
from attendance_tracker.reports.service import AttendanceReportService
from attendance_tracker.students.memory_student_repository import InMemoryStudentRepository
from attendance_tracker.students.model import StudentProfile


def _ledger():
    students = InMemoryStudentRepository()
    students.create(StudentProfile(student_id="s1", name="A", roll_number="R1"))
    return AttendanceService(InMemoryAttendanceRepository(), students)


def test_summary_groups_by_month_and_marks_missing_days():
    ledger = _ledger()
    ledger.check_in("s1", now=datetime(2026, 1, 31, 8, 0))
    ledger.check_in("s1", now=datetime(2026, 2, 2, 10, 30))
    ledger.check_in("s1", now=datetime(2026, 2, 4, 8, 0))

    summary = AttendanceReportService(ledger).build_summary("s1", today=date(2026, 2, 4))

    assert [m["month"] for m in summary.monthly] == ["2026-01", "2026-02"]
    assert summary.monthly[1] == {"month": "2026-02", "present": 1, "late": 1, "total": 2, "percentage": 100.0}

    week = summary.last_seven_days
    assert len(week) == 7
    assert week[-1] == {"date": "2026-02-04", "weekday": "Wed", "status": "present"}
    assert week[-3]["status"] == "late"
    assert week[-2]["status"] == "absent"
    assert summary.below_threshold is False


def test_summary_for_student_without_records():
    summary = AttendanceReportService(_ledger()).build_summary("s1", today=date(2026, 2, 4))

    assert summary.stats.total == 0
    assert summary.monthly == []
    assert all(d["status"] == "absent" for d in summary.last_seven_days)
    assert summary.to_dict()["stats"]["percentage"] == 0.0
