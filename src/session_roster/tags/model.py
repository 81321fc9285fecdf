from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import is_valid_tag_name
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Tag:
    """Label that can be attached to persons. Identity is the label itself."""

    tag_name: str

    def __post_init__(self):
        if not is_valid_tag_name(self.tag_name):
            raise ValidationError(f"Tag names should be alphanumeric: {self.tag_name!r}")

    def is_same_tag(self, other: "Tag | None") -> bool:
        return other is not None and other.tag_name == self.tag_name

    def __str__(self) -> str:
        return f"[{self.tag_name}]"
