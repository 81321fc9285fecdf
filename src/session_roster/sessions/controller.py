from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_errors
from ..core.exceptions import ValidationError
from ..container import Container
from .model import Session

logger = logging.getLogger(__name__)


def session_to_dict(s: Session, *, detail: bool = False) -> dict:
    out = {
        "id": s.session_id,
        "name": s.name,
        "start": s.start_date_time,
        "end": s.end_date_time,
        "location": s.location,
        "command": s.get_command(),
        "attendance": s.attendance_summary(),
    }
    if detail:
        out["attendees"] = s.attendance_map
        out["pay_rates"] = s.pay_rate_map
        out["duration_minutes"] = s.duration_minutes()
        out["total_pay"] = s.total_pay()
    return out


def session_from_json(data: dict) -> Session:
    missing = [k for k in ("name", "start", "end", "location") if not data.get(k)]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")
    return Session(data["start"], data["end"], data["name"], data["location"])


def register(app: Flask, container: Container) -> None:
    registry = container.registry
    lock = container.lock

    @app.route("/sessions", methods=["GET"], endpoint="list_sessions")
    @json_errors
    def list_sessions():
        with lock:
            return jsonify([session_to_dict(s) for s in sorted(registry.session_list)])

    @app.route("/sessions", methods=["POST"], endpoint="add_session")
    @json_errors
    def add_session():
        session = session_from_json(request.get_json(silent=True) or {})
        with lock:
            registry.add_session(session)
        logger.info("Added session %s", session.to_command_string())
        return jsonify(session_to_dict(session)), 201

    @app.route("/sessions/<name>", methods=["GET"], endpoint="get_session")
    @json_errors
    def get_session(name: str):
        with lock:
            return jsonify(session_to_dict(registry.find_session_by_name(name), detail=True))

    @app.route("/sessions/<name>", methods=["DELETE"], endpoint="delete_session")
    @json_errors
    def delete_session(name: str):
        with lock:
            registry.remove_session(registry.find_session_by_name(name))
        logger.info("Removed session %s", name)
        return "", 204

    @app.route("/sessions/<name>/attendees", methods=["POST"], endpoint="add_attendee")
    @json_errors
    def add_attendee(name: str):
        data = request.get_json(silent=True) or {}
        with lock:
            person = registry.find_person_by_name(data.get("person") or "")
            registry.add_person_to_session(person, registry.find_session_by_name(name))
            return jsonify(session_to_dict(registry.find_session_by_name(name), detail=True)), 201

    @app.route("/sessions/<name>/attendees/<person_name>", methods=["DELETE"], endpoint="remove_attendee")
    @json_errors
    def remove_attendee(name: str, person_name: str):
        with lock:
            person = registry.find_person_by_name(person_name)
            registry.remove_person_from_session(person, registry.find_session_by_name(name))
        return "", 204

    @app.route("/sessions/<name>/attendance/<person_name>", methods=["POST"], endpoint="mark_attendance")
    @json_errors
    def mark_attendance(name: str, person_name: str):
        data = request.get_json(silent=True) or {}
        present = data.get("present", True)
        if not isinstance(present, bool):
            raise ValidationError("present should be true or false")

        with lock:
            session = registry.find_session_by_name(name)
            if present:
                registry.mark_person_present(person_name, session)
            else:
                registry.mark_person_absent(person_name, session)
            updated = registry.find_session_by_name(name)
        return jsonify({"name": updated.name, "attendance": updated.attendance_summary(), "attendees": updated.attendance_map})

    @app.route("/sessions/<name>/pay", methods=["GET"], endpoint="session_pay")
    @json_errors
    def session_pay(name: str):
        with lock:
            session = registry.find_session_by_name(name)
            return jsonify(
                {
                    "name": session.name,
                    "attendance": session.attendance_summary(),
                    "duration_minutes": session.duration_minutes(),
                    "total_pay": session.total_pay(),
                }
            )
