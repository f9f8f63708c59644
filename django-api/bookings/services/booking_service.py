"""Booking coordinator - registration and cancellation.

The coordinator never checks for an existing registration before inserting.
Double bookings are rejected by the ledger's uniqueness constraint and
surfaced as AlreadyRegisteredError, so a retried or concurrent register
resolves to exactly one row.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from django.utils import timezone

from bookings.domain import Registration, SessionId, UserId
from bookings.domain.errors import (
    AlreadyRegisteredError,
    InvalidRegistrationRequestError,
    PersistenceError,
    SessionNotBookableError,
    SessionNotFoundError,
)
from bookings.stores.interfaces import (
    RegistrationLedger,
    SessionStore,
    StoreError,
    UniqueViolation,
)

logger = logging.getLogger(__name__)


def parse_booking_ids(user_id: Any, session_id: Any) -> tuple[UserId, SessionId]:
    """Turn raw request values into value objects.

    Raises:
        InvalidRegistrationRequestError: If either value is missing or malformed.
    """
    if user_id in (None, "") or session_id in (None, ""):
        raise InvalidRegistrationRequestError("userId and sessionId are required")
    try:
        return UserId.from_raw(user_id), SessionId.from_raw(session_id)
    except ValueError as exc:
        raise InvalidRegistrationRequestError(str(exc)) from exc


class BookingService:
    """Service for registering and cancelling bookings."""

    def __init__(
        self,
        sessions: SessionStore,
        ledger: RegistrationLedger,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._sessions = sessions
        self._ledger = ledger
        self._clock = clock

    def register(self, user_id: Any, session_id: Any) -> Registration:
        """Book a session for a user.

        Raises:
            InvalidRegistrationRequestError: If either ID is missing or malformed.
            SessionNotFoundError: If the session does not exist.
            SessionNotBookableError: If the session is NEWS or has ended.
            AlreadyRegisteredError: If the user already holds this booking.
            PersistenceError: On any other store failure.
        """
        uid, sid = parse_booking_ids(user_id, session_id)

        try:
            session = self._sessions.get_session(sid)
        except StoreError as exc:
            logger.exception("Session lookup failed for %s", sid)
            raise PersistenceError() from exc
        if session is None:
            raise SessionNotFoundError(sid)
        if not session.bookable:
            raise SessionNotBookableError(sid, "News items cannot be booked")
        if not session.is_current(self._clock()):
            raise SessionNotBookableError(sid, "Session has already ended")

        try:
            registration = self._ledger.add(uid, sid)
        except UniqueViolation as exc:
            logger.info("Duplicate registration rejected: user=%s session=%s", uid, sid)
            raise AlreadyRegisteredError(uid, sid) from exc
        except StoreError as exc:
            logger.exception("Registration insert failed: user=%s session=%s", uid, sid)
            raise PersistenceError() from exc

        logger.info("Registered user=%s session=%s", uid, sid)
        return registration

    def cancel(self, user_id: Any, session_id: Any) -> bool:
        """Cancel a booking.

        Cancelling a booking that does not exist succeeds; the return value
        tells whether a row was actually removed.

        Raises:
            InvalidRegistrationRequestError: If either ID is missing or malformed.
            PersistenceError: On store failure.
        """
        uid, sid = parse_booking_ids(user_id, session_id)
        try:
            removed = self._ledger.remove(uid, sid)
        except StoreError as exc:
            logger.exception("Registration delete failed: user=%s session=%s", uid, sid)
            raise PersistenceError() from exc

        if removed:
            logger.info("Cancelled user=%s session=%s", uid, sid)
        else:
            logger.info("Cancel matched no registration: user=%s session=%s", uid, sid)
        return bool(removed)
