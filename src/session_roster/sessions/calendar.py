from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Session


@dataclass(frozen=True)
class CalendarEvent:
    """Read-model of a session for calendar views."""

    session_id: int
    name: str
    location: str
    start: datetime
    end: datetime

    @classmethod
    def from_session(cls, session: "Session") -> "CalendarEvent":
        return cls(
            session_id=session.session_id,
            name=session.name,
            location=session.location,
            start=session.start,
            end=session.end,
        )

    @property
    def date(self) -> str:
        return self.start.strftime("%d-%m-%Y")

    @property
    def time_range(self) -> str:
        return f"{self.start:%H:%M} - {self.end:%H:%M}"
