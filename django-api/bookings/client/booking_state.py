"""Booking-state cache: which sessions the current user is booked on.

A disposable projection of the user's schedule. It is only as fresh as its
last refresh(), which callers trigger on screen load and after every
register or cancel; there is no polling and no incremental patching.
"""

from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from bookings.client.gateway import BookingGateway
from bookings.domain import Offering, Session, SessionId

ScheduleListener = Callable[[list[Session]], None]


class BookingStateCache:
    def __init__(
        self,
        gateway: BookingGateway,
        user_id: str,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._gateway = gateway
        self._user_id = user_id
        self._clock = clock
        self._schedule: list[Session] = []
        self._registered: frozenset[SessionId] = frozenset()
        self._refreshed_at: datetime | None = None
        self._stale = True
        self._listeners: list[ScheduleListener] = []

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def schedule(self) -> list[Session]:
        return list(self._schedule)

    @property
    def registered_ids(self) -> frozenset[SessionId]:
        return self._registered

    @property
    def refreshed_at(self) -> datetime | None:
        return self._refreshed_at

    @property
    def is_stale(self) -> bool:
        return self._stale

    def refresh(self) -> list[Session]:
        """Refetch the schedule and notify listeners.

        Errors from the gateway propagate; the previous state is kept and
        marked stale.
        """
        try:
            schedule = self._gateway.get_schedule(self._user_id)
        except Exception:
            self._stale = True
            raise
        self._schedule = schedule
        self._registered = frozenset(session.id for session in schedule)
        self._refreshed_at = self._clock()
        self._stale = False
        for listener in list(self._listeners):
            listener(self.schedule)
        return self.schedule

    def invalidate(self) -> None:
        self._stale = True

    def subscribe(self, listener: ScheduleListener) -> Callable[[], None]:
        """Call listener with the fresh schedule after every refresh.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def is_registered(self, session_id: SessionId) -> bool:
        return session_id in self._registered

    def is_offering_booked(self, offering: Offering) -> bool:
        return offering.is_booked(self._registered)
