from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.validators import is_valid_email, is_valid_location, is_valid_name, is_valid_pay_rate, is_valid_phone
from ..core.exceptions import ValidationError
from ..tags.model import Tag


@dataclass(frozen=True)
class Person:
    """Domain entity: a person on the roster.

    Identity is the name; two persons with the same name are the same
    person even if their other fields differ.
    """

    name: str
    pay_rate: int
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        if not is_valid_name(self.name):
            raise ValidationError(
                f"Names should only contain alphanumeric characters and spaces, and it should not be blank: {self.name!r}"
            )
        if not is_valid_pay_rate(self.pay_rate):
            raise ValidationError(f"Pay rate should be a non-negative integer: {self.pay_rate!r}")
        if self.phone is not None and not is_valid_phone(self.phone):
            raise ValidationError(f"Phone numbers should only contain numbers, at least 3 digits long: {self.phone!r}")
        if self.email is not None and not is_valid_email(self.email):
            raise ValidationError(f"Emails should be of the format local-part@domain: {self.email!r}")
        if self.address is not None and not is_valid_location(self.address):
            raise ValidationError("Addresses can take any values, and it should not be blank")
        # accept any iterable of tags but store an immutable set
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person | None") -> bool:
        return other is not None and other.name == self.name
