"""Booking panel: one offering's slots and the Register/Cancel action.

Every submit resolves to exactly one outcome kind. The panel asks to be
closed only after a clear success; a conflict keeps it open so the
"already booked" state stays visible.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from bookings.client.booking_state import BookingStateCache
from bookings.client.gateway import BookingGateway, GatewayError
from bookings.domain import Offering, Session, SessionId
from bookings.domain.grouping import find_offering, group_sessions
from bookings.domain.errors import (
    AlreadyRegisteredError,
    DomainError,
    InvalidRegistrationRequestError,
    SessionNotBookableError,
    SessionNotFoundError,
)

logger = logging.getLogger(__name__)


class BookingAction(Enum):
    REGISTER = "REGISTER"
    CANCEL = "CANCEL"
    NONE = "NONE"


class OutcomeKind(Enum):
    SUCCESS = "SUCCESS"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ERROR = "ERROR"


@dataclass(frozen=True)
class ActionOutcome:
    kind: OutcomeKind
    message: str
    action: BookingAction
    session_id: SessionId | None = None
    close: bool = False


SUCCESS_MESSAGES = {
    BookingAction.REGISTER: "Booked successfully!",
    BookingAction.CANCEL: "Booking cancelled.",
}
FAILURE_MESSAGES = {
    BookingAction.REGISTER: "Registration failed.",
    BookingAction.CANCEL: "Cancellation failed.",
}


class BookingPanel:
    def __init__(
        self,
        offering: Offering,
        gateway: BookingGateway,
        state: BookingStateCache,
    ) -> None:
        self.offering = offering
        self._gateway = gateway
        self._state = state
        default = offering.default_slot
        self._selected: SessionId | None = default.id if default is not None else None

    @classmethod
    def for_session(
        cls,
        session_id: SessionId,
        sessions: list[Session],
        gateway: BookingGateway,
        state: BookingStateCache,
    ) -> "BookingPanel":
        """Open the panel on the offering a session belongs to, with that slot selected.

        Used when a single session is picked outside the catalog, e.g. from the
        schedule.
        """
        offering = find_offering(group_sessions(sessions), session_id)
        if offering is None:
            raise ValueError(f"Session {session_id} is not in the catalog")
        panel = cls(offering, gateway, state)
        panel.select(session_id)
        return panel

    @property
    def slots(self) -> tuple[Session, ...]:
        return self.offering.slots

    @property
    def selected_session_id(self) -> SessionId | None:
        return self._selected

    def select(self, session_id: SessionId) -> None:
        if session_id not in self.offering.session_ids:
            raise ValueError(f"Session {session_id} is not a slot of {self.offering.key}")
        self._selected = session_id

    @property
    def is_booked(self) -> bool:
        return self._selected is not None and self._state.is_registered(self._selected)

    @property
    def action(self) -> BookingAction:
        if not self.offering.bookable or self._selected is None:
            return BookingAction.NONE
        return BookingAction.CANCEL if self.is_booked else BookingAction.REGISTER

    def submit(self) -> ActionOutcome:
        action = self.action
        sid = self._selected
        if not self.offering.bookable:
            return ActionOutcome(
                OutcomeKind.VALIDATION_ERROR, "News items cannot be booked.", action, sid
            )
        if sid is None:
            return ActionOutcome(
                OutcomeKind.VALIDATION_ERROR, "Select a time slot first.", action
            )

        user_id = self._state.user_id
        try:
            if action is BookingAction.REGISTER:
                self._gateway.register(user_id, sid)
            else:
                self._gateway.cancel(user_id, sid)
        except AlreadyRegisteredError:
            self._refresh_state()
            return ActionOutcome(
                OutcomeKind.CONFLICT, "You are already registered.", action, sid
            )
        except (
            InvalidRegistrationRequestError,
            SessionNotBookableError,
            SessionNotFoundError,
        ) as error:
            return ActionOutcome(OutcomeKind.VALIDATION_ERROR, error.message, action, sid)
        except GatewayError as error:
            return ActionOutcome(OutcomeKind.ERROR, str(error), action, sid)
        except DomainError as error:
            logger.warning("%s of session %s failed: %s", action.value, sid, error)
            return ActionOutcome(OutcomeKind.ERROR, FAILURE_MESSAGES[action], action, sid)

        self._refresh_state()
        return ActionOutcome(
            OutcomeKind.SUCCESS, SUCCESS_MESSAGES[action], action, sid, close=True
        )

    def _refresh_state(self) -> None:
        self._state.invalidate()
        # The action's own response already decided the outcome; a failed
        # refresh only leaves the cache marked stale.
        try:
            self._state.refresh()
        except (DomainError, GatewayError) as error:
            logger.warning("Booking state refresh failed: %s", error)
