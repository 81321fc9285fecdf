from __future__ import annotations

from enum import Enum


class PersonSortField(str, Enum):
    """Fields the person list can be sorted by."""

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    PAY_RATE = "pay_rate"
