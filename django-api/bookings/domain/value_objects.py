"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self
from uuid import UUID

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Email:
    """Attendee email, always trimmed and lower-cased."""

    value: str

    def __post_init__(self) -> None:
        if not EMAIL_PATTERN.match(self.value):
            raise ValueError("Please provide a valid email address")
        if self.value != self.value.strip().lower():
            raise ValueError("Email must be trimmed and lower-case")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not isinstance(value, str):
            raise ValueError("Please provide a valid email address")
        return cls(value=value.strip().lower())

    def __str__(self) -> str:
        return self.value
