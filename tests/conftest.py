from __future__ import annotations

import pytest

from session_roster.container import build_container
from session_roster.logging import reset_logging
from session_roster.main import create_app
from session_roster.persons.model import Person
from session_roster.registry.model import Registry
from session_roster.sessions.model import Session


@pytest.fixture
def alice() -> Person:
    return Person("Alice", 20)


@pytest.fixture
def bob() -> Person:
    return Person("Bob", 30)


@pytest.fixture
def training() -> Session:
    return Session("01-01-2024 10:00", "01-01-2024 12:00", "Training", "Gym")


@pytest.fixture
def tutorial() -> Session:
    return Session("02-01-2024 14:00", "02-01-2024 15:30", "Tutorial", "Room 101")


@pytest.fixture
def registry(alice, bob, training, tutorial) -> Registry:
    r = Registry()
    r.add_person(alice)
    r.add_person(bob)
    r.add_session(training)
    r.add_session(tutorial)
    return r


@pytest.fixture
def container(registry):
    return build_container(registry=registry)


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    reset_logging()
    app = create_app(container)
    yield app.test_client()
    reset_logging()
