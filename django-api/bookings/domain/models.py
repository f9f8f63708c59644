"""Domain models representing persisted and derived state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from bookings.domain.value_objects import Category, SessionId, UserId


@dataclass(frozen=True)
class Session:
    """Domain representation of a single bookable time instance."""

    id: SessionId
    title: str
    category: Category
    instructor: str
    start_time: datetime
    end_time: datetime
    description: str = ""
    image_url: str | None = None

    def __post_init__(self) -> None:
        if self.start_time >= self.end_time:
            raise ValueError("Session must start before it ends")

    @property
    def bookable(self) -> bool:
        return self.category.bookable

    @property
    def grouping_key(self) -> str:
        return getattr(self, self.category.grouping_field)

    def is_current(self, now: datetime) -> bool:
        """A session stays current until its end_time has passed."""
        return self.end_time >= now


@dataclass(frozen=True)
class Registration:
    """Domain representation of one user's booking of one session."""

    user_id: UserId
    session_id: SessionId
    created_at: datetime


@dataclass(frozen=True)
class Offering:
    """The same class across one or more time slots.

    Derived on every catalog load; has no identity beyond its slots.
    """

    category: Category
    key: str
    slots: tuple[Session, ...]

    @property
    def bookable(self) -> bool:
        return self.category.bookable

    @property
    def session_ids(self) -> tuple[SessionId, ...]:
        return tuple(slot.id for slot in self.slots)

    @property
    def default_slot(self) -> Session | None:
        """The only slot when there is nothing to choose between."""
        if len(self.slots) == 1:
            return self.slots[0]
        return None

    def is_booked(self, registered_ids: frozenset[SessionId]) -> bool:
        return any(slot.id in registered_ids for slot in self.slots)
