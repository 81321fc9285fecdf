"""Demo data for local development (SEED_DEMO_DATA=1)."""
from __future__ import annotations

from .persons.model import Person
from .registry.model import Registry
from .sessions.model import Session
from .tags.model import Tag


def seed_demo_data(registry: Registry) -> None:
    coach = Tag("coach")
    tutor = Tag("tutor")
    registry.add_all_tags([coach, tutor])

    alice = Person("Alice Tan", 20, phone="91234567", email="alice@example.com", tags={tutor})
    bob = Person("Bob Lim", 30, phone="98765432", email="bob@example.com", tags={coach})
    registry.add_person(alice)
    registry.add_person(bob)

    training = Session("01-01-2024 10:00", "01-01-2024 12:00", "Training", "Gym")
    tutorial = Session("02-01-2024 14:00", "02-01-2024 15:30", "Math Tutorial", "Room 101")
    registry.add_session(training)
    registry.add_session(tutorial)

    registry.add_person_to_session(alice, training)
    registry.add_person_to_session(bob, training)
    registry.add_person_to_session(alice, tutorial)
    registry.mark_person_present(alice.name, training)
