from __future__ import annotations

import re

_NAME_RE = re.compile(r"^[^\W_](?:[^\W_]| )*$", re.ASCII)
_PHONE_RE = re.compile(r"^\d{3,}$", re.ASCII)
_EMAIL_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9+_.\-]*@[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?)*$", re.ASCII)
_TAG_RE = re.compile(r"^[^\W_]+$", re.ASCII)


def is_valid_name(value: str) -> bool:
    """Alphanumeric words separated by spaces; first character alphanumeric."""
    return isinstance(value, str) and bool(_NAME_RE.fullmatch(value))


def is_valid_location(value: str) -> bool:
    return isinstance(value, str) and bool(value) and not value[0].isspace()


def is_valid_phone(value: str) -> bool:
    return isinstance(value, str) and bool(_PHONE_RE.fullmatch(value))


def is_valid_email(value: str) -> bool:
    return isinstance(value, str) and bool(_EMAIL_RE.fullmatch(value))


def is_valid_tag_name(value: str) -> bool:
    return isinstance(value, str) and bool(_TAG_RE.fullmatch(value))


def is_valid_pay_rate(value: int) -> bool:
    # bool is an int subclass; a pay rate of True is a caller mistake
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
