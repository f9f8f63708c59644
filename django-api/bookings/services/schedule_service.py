"""Schedule projector - a user's booked sessions in time order."""

import logging
from typing import Any

from bookings.domain import Session, UserId
from bookings.domain.errors import InvalidRegistrationRequestError, PersistenceError
from bookings.stores.interfaces import RegistrationLedger, SessionStore, StoreError

logger = logging.getLogger(__name__)


class ScheduleService:
    """Joins a user's registrations back onto the session catalog.

    Read-only and uncached: every call reflects the ledger as it is now.
    """

    def __init__(self, sessions: SessionStore, ledger: RegistrationLedger) -> None:
        self._sessions = sessions
        self._ledger = ledger

    def get_schedule(self, user_id: Any) -> list[Session]:
        """Return the user's booked sessions sorted by start_time.

        Registrations whose session no longer exists are dropped.

        Raises:
            InvalidRegistrationRequestError: If user_id is missing or malformed.
            PersistenceError: On store failure.
        """
        try:
            uid = UserId.from_raw(user_id)
        except ValueError as exc:
            raise InvalidRegistrationRequestError(str(exc)) from exc

        try:
            registrations = self._ledger.list_for_user(uid)
            resolved = self._sessions.get_sessions(r.session_id for r in registrations)
        except StoreError as exc:
            logger.exception("Schedule load failed for user=%s", uid)
            raise PersistenceError() from exc

        orphans = [r.session_id for r in registrations if r.session_id not in resolved]
        if orphans:
            logger.warning(
                "Dropping %d orphaned registration(s) for user=%s: %s",
                len(orphans),
                uid,
                ", ".join(str(sid) for sid in orphans),
            )

        schedule = [resolved[r.session_id] for r in registrations if r.session_id in resolved]
        return sorted(schedule, key=lambda s: (s.start_time, s.id.value))
