from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import StudentProfile
from .repository import StudentRepository

_COLUMNS = "student_id, name, roll_number, course, semester, email"


def _row_to_student(r: dict) -> StudentProfile:
    return StudentProfile(
        student_id=str(r["student_id"]),
        name=r["name"],
        roll_number=r["roll_number"],
        course=r.get("course") or "",
        semester=r.get("semester") or "",
        email=r.get("email") or "",
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: str) -> Optional[StudentProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (student_id,))
            row = fetchone(cur)
            return _row_to_student(row) if row else None

    def get_by_roll_number(self, roll_number: str) -> Optional[StudentProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE roll_number=%s", (roll_number,))
            row = fetchone(cur)
            return _row_to_student(row) if row else None

    def create(self, student: StudentProfile) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO students(student_id, name, roll_number, course, semester, email)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        student.student_id,
                        student.name,
                        student.roll_number,
                        student.course,
                        student.semester,
                        student.email,
                    ),
                )
            except mysql.connector.IntegrityError as exc:
                if is_duplicate_key(exc):
                    return False
                raise
            return True

    def update(self, student: StudentProfile) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    UPDATE students
                    SET name=%s, roll_number=%s, course=%s, semester=%s, email=%s
                    WHERE student_id=%s
                    """,
                    (
                        student.name,
                        student.roll_number,
                        student.course,
                        student.semester,
                        student.email,
                        student.student_id,
                    ),
                )
            except mysql.connector.IntegrityError as exc:
                if is_duplicate_key(exc):
                    return False
                raise
            # MySQL reports 0 changed rows when values are identical; existence was checked by the service.
            return True

    def delete_by_id(self, student_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (student_id,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[StudentProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY roll_number")
            return [_row_to_student(r) for r in fetchall(cur)]
