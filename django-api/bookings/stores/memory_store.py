"""In-memory store implementations.

Used by unit tests and local tooling. The ledger enforces the same
(user, session) uniqueness as the database constraint, atomically under a lock.
"""

import threading
from collections.abc import Callable, Iterable
from datetime import datetime

from django.utils import timezone

from bookings.domain import Registration, Session, SessionId, UserId
from bookings.stores.interfaces import RegistrationLedger, SessionStore, UniqueViolation


class InMemorySessionStore(SessionStore):
    def __init__(self, sessions: Iterable[Session] = ()) -> None:
        self._sessions: dict[SessionId, Session] = {}
        for session in sessions:
            self.put(session)

    def put(self, session: Session) -> None:
        self._sessions[session.id] = session

    def delete(self, session_id: SessionId) -> None:
        self._sessions.pop(session_id, None)

    def list_current(self, now: datetime) -> list[Session]:
        current = [s for s in self._sessions.values() if s.is_current(now)]
        return sorted(current, key=lambda s: (s.start_time, s.id.value))

    def get_session(self, session_id: SessionId) -> Session | None:
        return self._sessions.get(session_id)

    def get_sessions(self, session_ids: Iterable[SessionId]) -> dict[SessionId, Session]:
        return {
            session_id: self._sessions[session_id]
            for session_id in session_ids
            if session_id in self._sessions
        }


class InMemoryRegistrationLedger(RegistrationLedger):
    def __init__(self, clock: Callable[[], datetime] = timezone.now) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._rows: dict[tuple[UserId, SessionId], Registration] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def add(self, user_id: UserId, session_id: SessionId) -> Registration:
        key = (user_id, session_id)
        with self._lock:
            if key in self._rows:
                raise UniqueViolation(f"registration exists for {user_id} / {session_id}")
            registration = Registration(
                user_id=user_id, session_id=session_id, created_at=self._clock()
            )
            self._rows[key] = registration
        return registration

    def remove(self, user_id: UserId, session_id: SessionId) -> int:
        with self._lock:
            return 1 if self._rows.pop((user_id, session_id), None) else 0

    def list_for_user(self, user_id: UserId) -> list[Registration]:
        with self._lock:
            return [r for (uid, _), r in self._rows.items() if uid == user_id]
