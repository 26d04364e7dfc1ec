from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..common.responses import error_response, json_body
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, StorageUnavailableError, ValidationError


def _parse_filters(args) -> dict:
    try:
        start = parse_iso_date(args["start"]) if args.get("start") else None
        end = parse_iso_date(args["end"]) if args.get("end") else None
    except ValueError:
        raise ValidationError("Dates must use YYYY-MM-DD") from None

    status = None
    if args.get("status"):
        try:
            status = AttendanceStatus(args["status"].lower())
        except ValueError:
            raise ValidationError(f"Unknown status: {args['status']}") from None
    return {"start": start, "end": end, "status": status}


def register(app: Flask, container: Container) -> None:
    ledger = container.attendance_service
    reports = container.report_service

    @app.route("/api/attendance", methods=["POST"], endpoint="check_in")
    def check_in():
        try:
            data = json_body(request)
            student_id = str(data.get("studentId") or "").strip()
            if not student_id:
                raise ValidationError("studentId is required")

            now = None
            if data.get("timestamp"):
                try:
                    now = parse_iso_datetime(str(data["timestamp"]))
                except ValueError:
                    raise ValidationError("timestamp must be ISO-8601") from None

            record = ledger.check_in(student_id, now=now, subject=data.get("subject"), notes=data.get("notes"))
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)
        return jsonify({"success": True, "record": record.to_dict()}), 201

    @app.route("/api/attendance/<student_id>", methods=["GET"], endpoint="list_attendance")
    def list_attendance(student_id: str):
        try:
            records = ledger.find_by_student(student_id, **_parse_filters(request.args))
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/<student_id>/date/<day>", methods=["GET"], endpoint="attendance_on_date")
    def attendance_on_date(student_id: str, day: str):
        try:
            try:
                work_date = parse_iso_date(day)
            except ValueError:
                raise ValidationError("Dates must use YYYY-MM-DD") from None
            record = ledger.find_by_date(student_id, work_date)
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)
        return jsonify(record.to_dict())

    @app.route("/api/attendance/<student_id>/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today(student_id: str):
        try:
            record = ledger.today(student_id)
        except StorageUnavailableError as e:
            return error_response(e)
        return jsonify({"checkedIn": record is not None, "record": record.to_dict() if record else None})

    @app.route("/api/attendance/<student_id>/stats", methods=["GET"], endpoint="attendance_stats")
    def attendance_stats(student_id: str):
        try:
            return jsonify(ledger.stats(student_id).to_dict())
        except StorageUnavailableError as e:
            return error_response(e)

    @app.route("/api/attendance/<student_id>/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary(student_id: str):
        try:
            return jsonify(reports.build_summary(student_id).to_dict())
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)

    @app.route("/api/attendance/record/<record_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(record_id: str):
        try:
            ledger.delete(record_id)
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)
        return jsonify({"success": True, "message": "Attendance record deleted successfully"})
