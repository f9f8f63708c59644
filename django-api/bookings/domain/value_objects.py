"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

MAX_SESSION_ID = 2**63 - 1


class Category(Enum):
    """Kind of offering a session belongs to."""

    ADULT = "ADULT"
    YOUTH = "YOUTH"
    COACH = "COACH"
    FACILITY = "FACILITY"
    EVENT = "EVENT"
    NEWS = "NEWS"

    @property
    def bookable(self) -> bool:
        return self is not Category.NEWS

    @property
    def grouping_field(self) -> str:
        """Session attribute that identifies "the same offering" in this category."""
        return "instructor" if self is Category.COACH else "title"


@dataclass(frozen=True)
class SessionId:
    """Unique identifier for a Session."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("SessionId must be an integer")
        if self.value <= 0:
            raise ValueError("SessionId must be positive")
        if self.value > MAX_SESSION_ID:
            raise ValueError("SessionId is out of range")

    @classmethod
    def from_raw(cls, value: Any) -> Self:
        """Parse an id coming off the wire (int or digit string)."""
        if isinstance(value, str):
            value = value.strip()
            if not value.isdigit():
                raise ValueError("Invalid session ID format")
            value = int(value)
        return cls(value=value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId:
    """Opaque identity issued by the external auth provider."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("UserId cannot be empty")
        if len(self.value) > 64:
            raise ValueError("UserId is too long")

    @classmethod
    def from_raw(cls, value: Any) -> Self:
        if value is None or isinstance(value, bool):
            raise ValueError("UserId is required")
        if isinstance(value, int):
            value = str(value)
        if not isinstance(value, str):
            raise ValueError("Invalid user ID format")
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value
