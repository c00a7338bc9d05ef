"""Domain entities: Contact and RefreshLevel."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Contact:
    """
    One addressable contact parsed from a mutt line.
    Carries no identity beyond its fields; two contacts with equal fields are equal.
    """

    name: str
    email: str


class RefreshLevel(Enum):
    """How much work a search does before presenting candidates."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"

    @classmethod
    def from_count(cls, count: int | None) -> "RefreshLevel":
        """Map a repeated-flag count (-r, -rr) to a level."""
        if not count or count < 1:
            return cls.NONE
        if count == 1:
            return cls.SINGLE
        return cls.DOUBLE
