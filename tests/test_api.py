from __future__ import annotations

import pytest

from attendance_tracker.container import build_memory_container
from attendance_tracker.main import create_app


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=build_memory_container())


@pytest.fixture
def client(app):
    return app.test_client()


def _student(client, **overrides):
    body = {"id": "s1", "name": "Ann", "rollNumber": "R1", "course": "CS", "semester": "5th", "email": "a@x.io"}
    body.update(overrides)
    return client.post("/api/students", json=body)


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json()["degraded"] is False


def test_student_crud(client):
    assert _student(client).status_code == 201
    assert _student(client, id="s2").status_code == 400

    resp = client.get("/api/students/s1")
    assert resp.get_json()["rollNumber"] == "R1"

    resp = client.put("/api/students/s1", json={"name": "Anna"})
    assert resp.get_json()["student"]["name"] == "Anna"

    assert client.get("/api/students/missing").status_code == 404
    assert [s["id"] for s in client.get("/api/students").get_json()] == ["s1"]

    assert client.delete("/api/students/s1").status_code == 200
    assert client.get("/api/students/s1").status_code == 404


def test_default_student_created_once(client):
    first = client.post("/api/students/default", json={}).get_json()
    second = client.post("/api/students/default", json={"id": first["id"]}).get_json()

    assert first == second
    assert first["rollNumber"] == "STU001"


def test_checkin_flow(client):
    _student(client)

    resp = client.post(
        "/api/attendance",
        json={"studentId": "s1", "timestamp": "2026-02-02T08:30:00", "subject": "Math"},
    )
    assert resp.status_code == 201
    record = resp.get_json()["record"]
    assert record["status"] == "present"
    assert record["date"] == "2026-02-02"
    assert record["checkInTime"] == "08:30:00"
    assert record["notes"] is None

    dup = client.post("/api/attendance", json={"studentId": "s1", "timestamp": "2026-02-02T10:30:00"})
    assert dup.status_code == 409
    assert dup.get_json()["error"] == "DUPLICATE_CHECK_IN"

    late = client.post("/api/attendance", json={"studentId": "s1", "timestamp": "2026-02-03T10:30:00"})
    assert late.get_json()["record"]["status"] == "late"

    records = client.get("/api/attendance/s1").get_json()
    assert [r["date"] for r in records] == ["2026-02-03", "2026-02-02"]

    only_late = client.get("/api/attendance/s1?status=late").get_json()
    assert [r["date"] for r in only_late] == ["2026-02-03"]

    on_day = client.get("/api/attendance/s1/date/2026-02-02")
    assert on_day.get_json()["id"] == record["id"]
    assert client.get("/api/attendance/s1/date/2026-02-05").status_code == 404

    assert client.get("/api/attendance/s1/stats").get_json() == {"total": 2, "present": 1, "late": 1}
    assert "monthly" in client.get("/api/attendance/s1/summary").get_json()

    assert client.delete(f"/api/attendance/record/{record['id']}").status_code == 200
    assert client.delete(f"/api/attendance/record/{record['id']}").status_code == 404
    assert client.get("/api/attendance/s1/stats").get_json()["total"] == 1


def test_checkin_errors(client):
    assert client.post("/api/attendance", json={}).status_code == 400
    assert client.post("/api/attendance", data="nope", content_type="text/plain").status_code == 400
    assert client.post("/api/attendance", json={"studentId": "ghost"}).status_code == 404

    _student(client)
    bad_ts = client.post("/api/attendance", json={"studentId": "s1", "timestamp": "yesterday"})
    assert bad_ts.status_code == 400
    assert client.get("/api/attendance/s1?start=02-02-2026").status_code == 400
    assert client.get("/api/attendance/s1?status=absent").status_code == 400


def test_overlong_subject_is_a_bad_request_not_an_outage(app, client):
    _student(client)

    resp = client.post("/api/attendance", json={"studentId": "s1", "subject": "x" * 200})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "VALIDATION_ERROR"
    assert app.extensions["attendance_tracker"].storage_mode.degraded is False
    assert client.get("/api/health").get_json()["degraded"] is False


def test_checkin_accepts_utc_z_suffix(client):
    _student(client)

    resp = client.post("/api/attendance", json={"studentId": "s1", "timestamp": "2026-02-02T08:30:00Z"})

    assert resp.status_code == 201
    record = resp.get_json()["record"]
    assert (record["date"], record["checkInTime"]) == ("2026-02-02", "08:30:00")


def test_today_endpoint(client):
    _student(client)

    resp = client.get("/api/attendance/s1/today").get_json()

    assert resp == {"checkedIn": False, "record": None}


def test_projection_endpoint(client):
    resp = client.post("/api/project", json={"classesHeld": 100, "classesAttended": 50, "targetPercent": 75})
    assert resp.status_code == 200
    assert resp.get_json()["classesToAttend"] == 100

    default_target = client.post("/api/project", json={"classesHeld": 20, "classesAttended": 20})
    assert default_target.get_json()["classesCanMiss"] == 6

    invalid = client.post("/api/project", json={"classesHeld": 5, "classesAttended": 6})
    assert invalid.status_code == 400
    assert invalid.get_json()["error"] == "INVALID_INPUT"

    unreachable = client.post("/api/project", json={"classesHeld": 5, "classesAttended": 4, "targetPercent": 100})
    assert unreachable.status_code == 422
    assert unreachable.get_json()["error"] == "UNREACHABLE"

    unbounded = client.post("/api/project", json={"classesHeld": 5, "classesAttended": 4, "targetPercent": 0})
    assert unbounded.get_json()["error"] == "UNBOUNDED"
