from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import AttendanceStrategyFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_STORAGE_TIMEOUT_SECONDS, LATE_CUTOFF_HOUR
from .database.connection import DBConfig, DatabaseConnection
from .projection.service import TargetProjector
from .reports.service import AttendanceReportService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .sync.mirrored_repository import MirroredAttendanceRepository, MirroredStudentRepository
from .sync.mode import StorageMode


@dataclass(frozen=True)
class Container:
    storage_mode: StorageMode

    student_service: StudentService
    attendance_service: AttendanceService
    report_service: AttendanceReportService
    target_projector: TargetProjector


def _assemble(
    *,
    mode: StorageMode,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    late_cutoff_hour: int,
) -> Container:
    attendance_service = AttendanceService(
        attendance_repo,
        students_repo,
        strategy_factory=AttendanceStrategyFactory(late_cutoff_hour=late_cutoff_hour),
    )
    return Container(
        storage_mode=mode,
        student_service=StudentService(students_repo, attendance_repo),
        attendance_service=attendance_service,
        report_service=AttendanceReportService(attendance_service),
        target_projector=TargetProjector(),
    )


def build_container(*, db_config: dict, late_cutoff_hour: int = LATE_CUTOFF_HOUR) -> Container:
    """MySQL primary with an in-memory mirror for degraded mode."""
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        connection_timeout=int(db_config.get("connection_timeout", DEFAULT_STORAGE_TIMEOUT_SECONDS)),
    )
    conn = DatabaseConnection.get_instance(config)
    mode = StorageMode(health_check=conn.ping)

    students_repo = MirroredStudentRepository(MySQLStudentRepository(conn), InMemoryStudentRepository(), mode)
    attendance_repo = MirroredAttendanceRepository(MySQLAttendanceRepository(conn), InMemoryAttendanceRepository(), mode)

    return _assemble(
        mode=mode,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        late_cutoff_hour=late_cutoff_hour,
    )


def build_memory_container(*, late_cutoff_hour: int = LATE_CUTOFF_HOUR) -> Container:
    """Storage-free wiring for tests and local demos."""
    return _assemble(
        mode=StorageMode(),
        students_repo=InMemoryStudentRepository(),
        attendance_repo=InMemoryAttendanceRepository(),
        late_cutoff_hour=late_cutoff_hour,
    )
