"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They report storage
failures with the exceptions below; mapping them to domain errors is the
services' job.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime

from bookings.domain import Registration, Session, SessionId, UserId


class StoreError(Exception):
    """The backing store failed to complete an operation."""


class UniqueViolation(StoreError):
    """An insert was rejected by a uniqueness constraint."""


class SessionStore(ABC):
    """Interface for reading the session catalog."""

    @abstractmethod
    def list_current(self, now: datetime) -> list[Session]:
        """Return sessions with end_time >= now, ordered by start_time ascending."""
        ...

    @abstractmethod
    def get_session(self, session_id: SessionId) -> Session | None:
        """Return a session by ID, or None if not found."""
        ...

    @abstractmethod
    def get_sessions(self, session_ids: Iterable[SessionId]) -> dict[SessionId, Session]:
        """Resolve many IDs at once; IDs that do not resolve are left out."""
        ...


class RegistrationLedger(ABC):
    """Interface for the (user, session) registration relation.

    Implementations must enforce uniqueness of (user_id, session_id) atomically
    in the store itself.
    """

    @abstractmethod
    def add(self, user_id: UserId, session_id: SessionId) -> Registration:
        """Insert a registration.

        Raises:
            UniqueViolation: If the pair is already registered.
            StoreError: On any other storage failure.
        """
        ...

    @abstractmethod
    def remove(self, user_id: UserId, session_id: SessionId) -> int:
        """Delete the matching registration, returning the number of rows removed."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: UserId) -> list[Registration]:
        """Return every registration held by the user."""
        ...
