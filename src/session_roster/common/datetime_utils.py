from __future__ import annotations

import re
from datetime import datetime

from ..core.constants import DATE_FORMAT, DATE_TIME_FORMAT, TIME_FORMAT
from ..core.exceptions import InvalidFormatError

# strptime accepts single-digit and non-ASCII digits; the wire format does not.
_SHAPES = {
    DATE_TIME_FORMAT: re.compile(r"\d{2}-\d{2}-\d{4} \d{2}:\d{2}", re.ASCII),
    DATE_FORMAT: re.compile(r"\d{2}-\d{2}-\d{4}", re.ASCII),
    TIME_FORMAT: re.compile(r"\d{2}:\d{2}", re.ASCII),
}


def _parse(value: str, fmt: str) -> datetime:
    if not isinstance(value, str) or not _SHAPES[fmt].fullmatch(value):
        raise ValueError(f"{value!r} does not match {fmt}")
    return datetime.strptime(value, fmt)


def parse_session_datetime(value: str) -> datetime:
    """Parse a ``dd-MM-yyyy HH:mm`` string.

    Raises:
        InvalidFormatError: If the value does not match the session format.
    """
    try:
        return _parse(value, DATE_TIME_FORMAT)
    except ValueError as e:
        raise InvalidFormatError(f"Date Time should be in the format dd-MM-yyyy HH:mm: {value!r}") from e


def format_session_datetime(value: datetime) -> str:
    return value.strftime(DATE_TIME_FORMAT)


def _matches(value: str, fmt: str) -> bool:
    try:
        _parse(value, fmt)
    except ValueError:
        return False
    return True


def is_valid_date_time_format(value: str) -> bool:
    return _matches(value, DATE_TIME_FORMAT)


def is_valid_date_format(value: str) -> bool:
    return _matches(value, DATE_FORMAT)


def is_valid_time_format(value: str) -> bool:
    return _matches(value, TIME_FORMAT)
