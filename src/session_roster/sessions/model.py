from __future__ import annotations

import zlib
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import format_session_datetime, parse_session_datetime
from ..common.validators import is_valid_location, is_valid_name
from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import InvalidSessionError, MissingPayRateError, PersonNotFoundError
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..persons.model import Person
from .calendar import CalendarEvent


@dataclass(frozen=True)
class AttendanceEntry:
    name: str
    present: bool


@dataclass(frozen=True)
class PayRateEntry:
    name: str
    pay_rate: int


def session_id_for(name: str) -> int:
    """Stable id derived from the session name. Not unique across sessions sharing a name."""
    return zlib.crc32(name.encode("utf-8"))


class Session:
    """A scheduled session with attendance and pay-rate snapshots.

    The identity fields (name, start, end, location) are read-only. The
    attendance and pay-rate maps are keyed by attendee name and mutated in
    place; the registry never mutates a stored session, it stores a mutated
    copy instead.
    """

    MESSAGE_CONSTRAINTS = "Start date time should be before end date time."

    def __init__(
        self,
        start_date_time: str,
        end_date_time: str,
        name: str,
        location: str,
        session_id: Optional[int] = None,
        *,
        attendance: Iterable[AttendanceEntry] = (),
        pay_rates: Iterable[PayRateEntry] = (),
    ):
        start = parse_session_datetime(start_date_time)
        end = parse_session_datetime(end_date_time)
        if start >= end:
            raise InvalidSessionError(self.MESSAGE_CONSTRAINTS)
        if not is_valid_name(name):
            raise InvalidSessionError(f"Invalid session name: {name!r}")
        if not is_valid_location(location):
            raise InvalidSessionError(f"Invalid location: {location!r}")

        self._start_date_time = start_date_time
        self._end_date_time = end_date_time
        self._start = start
        self._end = end
        self._name = name
        self._location = location
        self._session_id = session_id_for(name) if session_id is None else int(session_id)
        self._attendance: dict[str, bool] = {e.name: bool(e.present) for e in attendance}
        self._pay_rates: dict[str, int] = {e.name: int(e.pay_rate) for e in pay_rates}

    # identity

    @property
    def start_date_time(self) -> str:
        return self._start_date_time

    @property
    def end_date_time(self) -> str:
        return self._end_date_time

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return self._location

    @property
    def session_id(self) -> int:
        return self._session_id

    def _identity(self) -> tuple[str, str, str, str]:
        return (self._start_date_time, self._end_date_time, self._name, self._location)

    def is_same_session(self, other: Optional["Session"]) -> bool:
        return other is not None and (other is self or other._identity() == self._identity())

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Session):
            return NotImplemented
        return other._identity() == self._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: "Session") -> bool:
        if not isinstance(other, Session):
            return NotImplemented
        return self._start < other._start

    def compare_to(self, other: "Session") -> int:
        """Order by start time only: -1, 0 or 1."""
        return (self._start > other._start) - (self._start < other._start)

    # attendance

    def enroll(self, person: Person) -> None:
        """Add ``person`` as absent and snapshot their pay rate. Re-enrolling overwrites."""
        self._attendance[person.name] = False
        self._pay_rates[person.name] = person.pay_rate

    def withdraw(self, name: str) -> None:
        self._attendance.pop(name, None)
        self._pay_rates.pop(name, None)

    def is_enrolled(self, name: str) -> bool:
        return name in self._attendance

    def mark_present(self, name: str) -> None:
        self._mark(name, True)

    def mark_absent(self, name: str) -> None:
        self._mark(name, False)

    def _mark(self, name: str, present: bool) -> None:
        if name not in self._attendance:
            raise PersonNotFoundError(f"{name} is not enrolled in {self._name}")
        self._attendance[name] = present

    @property
    def attendance_map(self) -> dict[str, bool]:
        return dict(self._attendance)

    @property
    def pay_rate_map(self) -> dict[str, int]:
        return dict(self._pay_rates)

    @property
    def attendee_names(self) -> list[str]:
        return list(self._attendance)

    def attendance_entries(self) -> list[AttendanceEntry]:
        return [AttendanceEntry(name=n, present=p) for n, p in self._attendance.items()]

    def pay_rate_entries(self) -> list[PayRateEntry]:
        return [PayRateEntry(name=n, pay_rate=r) for n, r in self._pay_rates.items()]

    def attendance_summary(self) -> str:
        present = sum(1 for p in self._attendance.values() if p)
        return f"{present}/{len(self._attendance)}"

    def attendees(self) -> str:
        return ", ".join(f"{n}: {1 if p else 0}" for n, p in self._attendance.items())

    # payroll

    def duration(self) -> timedelta:
        return self._end - self._start

    def duration_minutes(self) -> int:
        return int(self.duration().total_seconds() // 60)

    def _pay_rate_of(self, name: str) -> int:
        try:
            return self._pay_rates[name]
        except KeyError:
            raise MissingPayRateError(f"No pay rate recorded for {name} in {self._name}") from None

    def pay_for(self, name: str, *, calculator: Optional[PayrollCalculator] = None) -> float:
        """Pay earned by one attendee; 0.0 when marked absent."""
        if name not in self._attendance:
            raise PersonNotFoundError(f"{name} is not enrolled in {self._name}")
        if not self._attendance[name]:
            return 0.0
        calculator = calculator or StandardPayrollCalculator()
        return calculator.pay_for(pay_rate=self._pay_rate_of(name), minutes=self.duration_minutes())

    def total_pay(self, *, calculator: Optional[PayrollCalculator] = None) -> float:
        calculator = calculator or StandardPayrollCalculator()
        minutes = self.duration_minutes()
        total = 0.0
        for name, present in self._attendance.items():
            if present:
                total += calculator.pay_for(pay_rate=self._pay_rate_of(name), minutes=minutes)
        return total

    # presentation helpers

    def date(self) -> str:
        return self._start.strftime(DATE_FORMAT)

    @property
    def day(self) -> int:
        return self._start.day

    @property
    def month(self) -> int:
        return self._start.month

    @property
    def year(self) -> int:
        return self._start.year

    def time_format(self) -> str:
        return self._start.strftime(TIME_FORMAT)

    def get_command(self) -> str:
        return f"{self._name}: from {self._start_date_time} to {self._end_date_time} | at {self._location}"

    def to_command_string(self) -> str:
        return (
            f"{self._name}: {format_session_datetime(self._start)} "
            f"to {format_session_datetime(self._end)} at {self._location}"
        )

    def calendar_events(self) -> list[CalendarEvent]:
        return [CalendarEvent.from_session(self)]

    def copy(self) -> "Session":
        return Session(
            self._start_date_time,
            self._end_date_time,
            self._name,
            self._location,
            self._session_id,
            attendance=self.attendance_entries(),
            pay_rates=self.pay_rate_entries(),
        )

    def __str__(self) -> str:
        return (
            f" Session name: {self._name}\n"
            f" Start: {format_session_datetime(self._start)}\n"
            f" End: {format_session_datetime(self._end)}\n"
            f" Location: {self._location}\n"
            f" Attendees: {self.attendees()}"
        )

    def __repr__(self) -> str:
        return (
            f"Session(name={self._name!r}, start={self._start_date_time!r}, "
            f"end={self._end_date_time!r}, location={self._location!r})"
        )
