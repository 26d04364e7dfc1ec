from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import error_response, json_body
from ..container import Container
from ..core.exceptions import DomainError, StorageUnavailableError

# camelCase request keys used by the client -> service keyword names
_FIELD_MAP = {
    "name": "name",
    "rollNumber": "roll_number",
    "course": "course",
    "semester": "semester",
    "email": "email",
}


def _fields(data: dict) -> dict:
    return {py: data[js] for js, py in _FIELD_MAP.items() if js in data}


def register(app: Flask, container: Container) -> None:
    students = container.student_service

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    def create_student():
        try:
            data = json_body(request)
            student = students.create(
                student_id=data.get("id"),
                name=data.get("name", ""),
                roll_number=data.get("rollNumber", ""),
                course=data.get("course", ""),
                semester=data.get("semester", ""),
                email=data.get("email", ""),
            )
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)
        return jsonify({"success": True, "student": student.to_dict()}), 201

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        try:
            return jsonify([s.to_dict() for s in students.list_all()])
        except StorageUnavailableError as e:
            return error_response(e)

    @app.route("/api/students/default", methods=["POST"], endpoint="default_student")
    def default_student():
        try:
            data = request.get_json(silent=True) or {}
            student = students.ensure_default_profile(data.get("id"))
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)
        return jsonify(student.to_dict())

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: str):
        try:
            return jsonify(students.get(student_id).to_dict())
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)

    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: str):
        try:
            student = students.update(student_id, **_fields(json_body(request)))
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)
        return jsonify({"success": True, "student": student.to_dict()})

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: str):
        try:
            students.delete(student_id)
        except (DomainError, StorageUnavailableError) as e:
            return error_response(e)
        return jsonify({"success": True, "message": "Student deleted successfully"})
