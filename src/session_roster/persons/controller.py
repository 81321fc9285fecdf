from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_errors
from ..core.constants import PAY_RATE_NOT_FOUND
from ..core.enums import PersonSortField
from ..core.exceptions import PersonNotFoundError, ValidationError
from ..container import Container
from ..tags.model import Tag
from .model import Person

logger = logging.getLogger(__name__)


def person_to_dict(p: Person) -> dict:
    return {
        "name": p.name,
        "pay_rate": p.pay_rate,
        "phone": p.phone,
        "email": p.email,
        "address": p.address,
        "tags": sorted(t.tag_name for t in p.tags),
    }


def person_from_json(data: dict) -> Person:
    if "name" not in data or "pay_rate" not in data:
        raise ValidationError("name and pay_rate are required")
    tags = data.get("tags") or []
    if not isinstance(tags, list):
        raise ValidationError("tags should be a list of tag names")
    return Person(
        name=data["name"],
        pay_rate=data["pay_rate"],
        phone=data.get("phone"),
        email=data.get("email"),
        address=data.get("address"),
        tags=frozenset(Tag(t) for t in tags),
    )


def register(app: Flask, container: Container) -> None:
    registry = container.registry
    lock = container.lock

    def _add_missing_tags(person: Person) -> None:
        for tag in person.tags:
            if not registry.has_tag(tag):
                registry.add_tag(tag)

    @app.route("/persons", methods=["GET"], endpoint="list_persons")
    @json_errors
    def list_persons():
        with lock:
            return jsonify([person_to_dict(p) for p in registry.person_list])

    @app.route("/persons", methods=["POST"], endpoint="add_person")
    @json_errors
    def add_person():
        person = person_from_json(request.get_json(silent=True) or {})
        with lock:
            registry.add_person(person)
            _add_missing_tags(person)
        logger.info("Added person %s", person.name)
        return jsonify(person_to_dict(person)), 201

    @app.route("/persons/<name>", methods=["PUT"], endpoint="edit_person")
    @json_errors
    def edit_person(name: str):
        data = request.get_json(silent=True) or {}
        with lock:
            target = registry.find_person_by_name(name)
            merged = {**person_to_dict(target), **data}
            edited = person_from_json(merged)
            registry.set_person(target, edited)
            _add_missing_tags(edited)
        return jsonify(person_to_dict(edited))

    @app.route("/persons/<name>", methods=["DELETE"], endpoint="delete_person")
    @json_errors
    def delete_person(name: str):
        with lock:
            registry.remove_person(registry.find_person_by_name(name))
        logger.info("Removed person %s", name)
        return "", 204

    @app.route("/persons/<name>/pay-rate", methods=["GET"], endpoint="person_pay_rate")
    @json_errors
    def person_pay_rate(name: str):
        with lock:
            rate = registry.pay_rate_for_person_named(name)
        if rate == PAY_RATE_NOT_FOUND:
            raise PersonNotFoundError(f"Person not found: {name}")
        return jsonify({"name": name, "pay_rate": rate})

    @app.route("/persons/sort", methods=["POST"], endpoint="sort_persons")
    @json_errors
    def sort_persons():
        data = request.get_json(silent=True) or {}
        try:
            field = PersonSortField(data.get("field", PersonSortField.NAME.value))
        except ValueError:
            raise ValidationError(f"Unknown sort field: {data.get('field')!r}") from None
        with lock:
            registry.sort_persons(field)
            return jsonify([person_to_dict(p) for p in registry.person_list])

    @app.route("/tags", methods=["GET"], endpoint="list_tags")
    @json_errors
    def list_tags():
        with lock:
            return jsonify([t.tag_name for t in registry.tag_list])

    @app.route("/tags", methods=["POST"], endpoint="add_tag")
    @json_errors
    def add_tag():
        data = request.get_json(silent=True) or {}
        tag = Tag(data.get("tag_name") or "")
        with lock:
            registry.add_tag(tag)
        return jsonify({"tag_name": tag.tag_name}), 201
