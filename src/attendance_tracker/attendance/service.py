from __future__ import annotations

import threading
import uuid
from collections import defaultdict
from contextlib import contextmanager
from datetime import date, datetime
from typing import Iterator, Optional, Sequence

from ..common.app_logger import get_logger
from ..common.datetime_utils import format_clock, now_local
from ..common.validators import optional_text, require_max_length
from ..core.constants import MAX_LENGTHS
from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateCheckInError, NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, AttendanceStats
from .repository import AttendanceRepository

log = get_logger(__name__)


class _KeyedLocks:
    """One lock per (student_id, date) so unrelated check-ins never wait on each other."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[tuple[str, date], threading.Lock] = {}
        self._users: dict[tuple[str, date], int] = defaultdict(int)

    @contextmanager
    def hold(self, key: tuple[str, date]) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._users[key] += 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._users[key] -= 1
                if self._users[key] == 0:
                    del self._users[key]
                    del self._locks[key]


class AttendanceService:
    """The attendance ledger: one check-in per student per calendar date."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._students = students
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._locks = _KeyedLocks()

    def check_in(
        self,
        student_id: str,
        *,
        now: datetime | None = None,
        subject: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()
        subject = require_max_length(optional_text(subject), "Subject", MAX_LENGTHS["subject"])
        notes = require_max_length(optional_text(notes), "Notes", MAX_LENGTHS["notes"])

        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        with self._locks.hold((student_id, today)):
            if self._attendance.get_for_student_and_date(student_id, today):
                raise DuplicateCheckInError("Already checked in today")

            strategy = self._factory.for_checkin(now=now)
            decision = strategy.decide_checkin(now=now)

            record = AttendanceRecord(
                record_id=uuid.uuid4().hex,
                student_id=student_id,
                work_date=today,
                check_in_time=format_clock(now),
                status=decision.status,
                subject=subject,
                notes=notes,
            )
            # Another process may have won the race between the read and this insert.
            if not self._attendance.insert_if_absent(record):
                raise DuplicateCheckInError("Already checked in today")

        log.info("check-in %s on %s: %s", student_id, today.isoformat(), record.status.value)
        return record

    def find_by_date(self, student_id: str, work_date: date) -> AttendanceRecord:
        record = self._attendance.get_for_student_and_date(student_id, work_date)
        if not record:
            raise NotFoundError(f"No attendance record on {work_date.isoformat()}")
        return record

    def today(self, student_id: str, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        now = now or now_local()
        return self._attendance.get_for_student_and_date(student_id, now.date())

    def find_by_student(
        self,
        student_id: str,
        *,
        start: date | None = None,
        end: date | None = None,
        status: AttendanceStatus | None = None,
    ) -> Sequence[AttendanceRecord]:
        if start and end and start > end:
            raise ValidationError("Start date must not be after end date")

        records = self._attendance.list_for_student(student_id)
        return [
            r
            for r in records
            if (start is None or r.work_date >= start)
            and (end is None or r.work_date <= end)
            and (status is None or r.status == status)
        ]

    def delete(self, record_id: str) -> None:
        if not self._attendance.delete_by_id(record_id):
            raise NotFoundError("Attendance record not found")
        log.info("deleted attendance record %s", record_id)

    def stats(self, student_id: str) -> AttendanceStats:
        counts = self._attendance.count_by_status(student_id)
        present = int(counts.get(AttendanceStatus.PRESENT, 0))
        late = int(counts.get(AttendanceStatus.LATE, 0))
        return AttendanceStats(total=present + late, present=present, late=late)
