from __future__ import annotations

import pytest
from flask import Flask

from session_roster.common.http import json_errors
from session_roster.core.exceptions import MissingPayRateError
from session_roster.sessions.model import AttendanceEntry, Session


def test_list_persons(client):
    resp = client.get("/persons")

    assert resp.status_code == 200
    assert [p["name"] for p in resp.get_json()] == ["Alice", "Bob"]


def test_add_person_registers_tags(client):
    resp = client.post("/persons", json={"name": "Carol", "pay_rate": 15, "tags": ["coach"]})

    assert resp.status_code == 201
    assert resp.get_json()["tags"] == ["coach"]
    assert client.get("/tags").get_json() == ["coach"]


def test_add_person_invalid_is_400(client):
    resp = client.post("/persons", json={"name": "Carol!", "pay_rate": 15})

    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "ValidationError"


def test_add_person_missing_fields_is_400(client):
    assert client.post("/persons", json={"name": "Carol"}).status_code == 400


def test_add_duplicate_person_is_409(client):
    resp = client.post("/persons", json={"name": "Alice", "pay_rate": 99})

    assert resp.status_code == 409
    assert resp.get_json()["kind"] == "DuplicateError"


def test_edit_person_merges_fields(client):
    resp = client.put("/persons/Alice", json={"pay_rate": 25})

    assert resp.status_code == 200
    assert resp.get_json()["pay_rate"] == 25
    assert client.get("/persons/Alice/pay-rate").get_json() == {"name": "Alice", "pay_rate": 25}


def test_edit_person_into_existing_name_is_409(client):
    assert client.put("/persons/Alice", json={"name": "Bob"}).status_code == 409


def test_delete_person(client):
    assert client.delete("/persons/Bob").status_code == 204
    assert client.delete("/persons/Bob").status_code == 404


def test_pay_rate_unknown_person_is_404(client):
    resp = client.get("/persons/Nobody/pay-rate")

    assert resp.status_code == 404
    assert resp.get_json()["kind"] == "PersonNotFoundError"


def test_sort_persons(client):
    client.post("/persons", json={"name": "Aaron", "pay_rate": 1})

    resp = client.post("/persons/sort", json={"field": "pay_rate"})

    assert [p["name"] for p in resp.get_json()] == ["Aaron", "Alice", "Bob"]
    assert client.post("/persons/sort", json={"field": "age"}).status_code == 400


def test_add_tag_twice_is_409(client):
    assert client.post("/tags", json={"tag_name": "tutor"}).status_code == 201
    assert client.post("/tags", json={"tag_name": "tutor"}).status_code == 409


def test_list_sessions_sorted_by_start(client):
    client.post(
        "/sessions",
        json={"name": "Early", "start": "31-12-2023 08:00", "end": "31-12-2023 09:00", "location": "Hall"},
    )

    names = [s["name"] for s in client.get("/sessions").get_json()]

    assert names == ["Early", "Training", "Tutorial"]


def test_add_session_bad_timestamp_is_400(client):
    resp = client.post(
        "/sessions",
        json={"name": "Swim", "start": "2024-01-01 10:00", "end": "01-01-2024 11:00", "location": "Pool"},
    )

    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "InvalidFormatError"


def test_add_session_end_before_start_is_400(client):
    resp = client.post(
        "/sessions",
        json={"name": "Swim", "start": "01-01-2024 11:00", "end": "01-01-2024 10:00", "location": "Pool"},
    )

    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "InvalidSessionError"


def test_unknown_session_is_404(client):
    resp = client.get("/sessions/Nope")

    assert resp.status_code == 404
    assert resp.get_json()["kind"] == "SessionNotFoundError"


def test_attendance_flow(client):
    assert client.post("/sessions/Training/attendees", json={"person": "Alice"}).status_code == 201

    resp = client.post("/sessions/Training/attendance/Alice", json={"present": True})
    assert resp.get_json()["attendance"] == "1/1"

    pay = client.get("/sessions/Training/pay").get_json()
    assert pay == {"name": "Training", "attendance": "1/1", "duration_minutes": 120, "total_pay": 40.0}

    detail = client.get("/sessions/Training").get_json()
    assert detail["attendees"] == {"Alice": True}
    assert detail["pay_rates"] == {"Alice": 20}


def test_mark_absent(client):
    client.post("/sessions/Training/attendees", json={"person": "Bob"})
    client.post("/sessions/Training/attendance/Bob", json={"present": True})

    resp = client.post("/sessions/Training/attendance/Bob", json={"present": False})

    assert resp.get_json()["attendees"] == {"Bob": False}


def test_mark_unenrolled_is_404(client):
    assert client.post("/sessions/Training/attendance/Alice", json={"present": True}).status_code == 404


def test_mark_with_non_bool_is_400(client):
    client.post("/sessions/Training/attendees", json={"person": "Alice"})

    assert client.post("/sessions/Training/attendance/Alice", json={"present": "yes"}).status_code == 400


def test_remove_attendee(client):
    client.post("/sessions/Training/attendees", json={"person": "Alice"})

    assert client.delete("/sessions/Training/attendees/Alice").status_code == 204
    assert client.delete("/sessions/Training/attendees/Alice").status_code == 404


def test_delete_session(client):
    assert client.delete("/sessions/Tutorial").status_code == 204
    assert [s["name"] for s in client.get("/sessions").get_json()] == ["Training"]


def test_missing_pay_rate_is_422(client, container):
    broken = Session(
        "03-01-2024 10:00",
        "03-01-2024 11:00",
        "Swim",
        "Pool",
        attendance=[AttendanceEntry("Ghost", True)],
    )
    container.registry.add_session(broken)

    resp = client.get("/sessions/Swim/pay")

    assert resp.status_code == 422
    assert resp.get_json()["kind"] == MissingPayRateError.__name__


def test_payroll_report(client):
    client.post("/sessions/Training/attendees", json={"person": "Alice"})
    client.post("/sessions/Training/attendance/Alice", json={"present": True})

    report = client.get("/payroll?start=2024-01-01&end=2024-01-31").get_json()

    assert report["total_pay"] == 40.0
    assert report["summary"][0]["name"] == "Alice"
    assert client.get("/payroll?start=2025-01-01").get_json()["rows"] == []


def test_payroll_bad_date_is_400(client):
    assert client.get("/payroll?start=01-01-2024").status_code == 400


def test_tags_must_be_a_list(client):
    resp = client.post("/persons", json={"name": "Carol", "pay_rate": 15, "tags": "coach"})

    assert resp.status_code == 400
    assert client.get("/tags").get_json() == []
    assert client.get("/persons/Carol/pay-rate").status_code == 404


def test_non_domain_errors_are_left_to_flask():
    app = Flask(__name__)
    app.testing = True

    @app.route("/boom")
    @json_errors
    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        app.test_client().get("/boom")
