"""Unit tests for the booking, schedule and catalog services.

These test invariants and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import threading
from datetime import timedelta

import pytest

from bookings.domain import Category, SessionId, UserId
from bookings.domain.errors import (
    AlreadyRegisteredError,
    InvalidRegistrationRequestError,
    PersistenceError,
    SessionNotBookableError,
    SessionNotFoundError,
)
from bookings.services import BookingService, CatalogService, ScheduleService
from bookings.stores.interfaces import StoreError
from bookings.stores.memory_store import InMemoryRegistrationLedger, InMemorySessionStore


class BrokenLedger(InMemoryRegistrationLedger):
    def add(self, user_id, session_id):
        raise StoreError("connection reset")

    def remove(self, user_id, session_id):
        raise StoreError("connection reset")

    def list_for_user(self, user_id):
        raise StoreError("connection reset")


class BrokenSessionStore(InMemorySessionStore):
    def list_current(self, now):
        raise StoreError("connection reset")

    def get_session(self, session_id):
        raise StoreError("connection reset")


@pytest.fixture
def catalog(session_store, make_session):
    session_store.put(make_session(501, title="Hyrox", hours=1))
    session_store.put(make_session(502, title="Hyrox", hours=5))
    session_store.put(make_session(801, title="Big Win", category=Category.NEWS))
    session_store.put(make_session(300, title="Yesterday", hours=-26))
    return session_store


@pytest.fixture
def bookings(catalog, ledger, clock) -> BookingService:
    return BookingService(catalog, ledger, clock=clock)


@pytest.fixture
def schedule(catalog, ledger) -> ScheduleService:
    return ScheduleService(catalog, ledger)


class TestRegister:
    """Tests for BookingService.register."""

    def test_register_persists_registration(self, bookings, ledger):
        registration = bookings.register(7, 501)
        assert registration.user_id == UserId("7")
        assert registration.session_id == SessionId(501)
        assert len(ledger) == 1

    def test_second_register_is_a_conflict(self, bookings, ledger):
        """Registering twice leaves one row and reports ALREADY_REGISTERED."""
        bookings.register(7, 501)
        with pytest.raises(AlreadyRegisteredError) as exc_info:
            bookings.register(7, 501)
        assert exc_info.value.message == "Already Registered"
        assert len(ledger) == 1

    def test_concurrent_registers_yield_one_row(self, bookings, ledger):
        """Parallel double-clicks: exactly one insert wins, the rest conflict."""
        workers = 8
        barrier = threading.Barrier(workers)
        results = []
        lock = threading.Lock()

        def attempt():
            barrier.wait()
            try:
                bookings.register(7, 501)
                outcome = "ok"
            except AlreadyRegisteredError:
                outcome = "conflict"
            with lock:
                results.append(outcome)

        threads = [threading.Thread(target=attempt) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert sorted(results) == ["conflict"] * (workers - 1) + ["ok"]
        assert len(ledger) == 1

    def test_other_users_can_book_same_session(self, bookings, ledger):
        bookings.register(7, 501)
        bookings.register(8, 501)
        assert len(ledger) == 2

    @pytest.mark.parametrize(
        "user_id, session_id",
        [(None, 501), ("", 501), (7, None), (7, ""), (7, "abc"), (7, 0)],
    )
    def test_missing_or_malformed_ids_rejected(self, bookings, ledger, user_id, session_id):
        with pytest.raises(InvalidRegistrationRequestError):
            bookings.register(user_id, session_id)
        assert len(ledger) == 0

    def test_unknown_session(self, bookings):
        with pytest.raises(SessionNotFoundError):
            bookings.register(7, 999)

    def test_news_is_not_bookable(self, bookings, ledger):
        with pytest.raises(SessionNotBookableError):
            bookings.register(7, 801)
        assert len(ledger) == 0

    def test_ended_session_is_not_bookable(self, bookings):
        with pytest.raises(SessionNotBookableError):
            bookings.register(7, 300)

    def test_store_failure_is_generic_error(self, catalog, clock):
        service = BookingService(catalog, BrokenLedger(), clock=clock)
        with pytest.raises(PersistenceError):
            service.register(7, 501)

    def test_session_lookup_failure_is_generic_error(self, ledger, clock):
        service = BookingService(BrokenSessionStore(), ledger, clock=clock)
        with pytest.raises(PersistenceError):
            service.register(7, 501)


class TestCancel:
    """Tests for BookingService.cancel."""

    def test_cancel_removes_registration(self, bookings, ledger):
        bookings.register(7, 501)
        assert bookings.cancel(7, 501) is True
        assert len(ledger) == 0

    def test_cancel_without_registration_succeeds(self, bookings, ledger):
        """Cancelling a booking that does not exist is a no-op, not an error."""
        bookings.register(8, 501)
        assert bookings.cancel(7, 501) is False
        assert len(ledger) == 1

    def test_cancel_then_rebook(self, bookings, ledger):
        bookings.register(7, 501)
        bookings.cancel(7, 501)
        bookings.register(7, 501)
        assert len(ledger) == 1

    def test_cancel_validates_ids(self, bookings):
        with pytest.raises(InvalidRegistrationRequestError):
            bookings.cancel(None, 501)

    def test_store_failure_is_generic_error(self, catalog, clock):
        service = BookingService(catalog, BrokenLedger(), clock=clock)
        with pytest.raises(PersistenceError):
            service.cancel(7, 501)


class TestSchedule:
    """Tests for ScheduleService.get_schedule."""

    def test_empty_schedule(self, schedule):
        assert schedule.get_schedule(7) == []

    def test_sorted_by_start_time_regardless_of_booking_order(self, bookings, schedule):
        bookings.register(7, 502)
        bookings.register(7, 501)
        assert [s.id.value for s in schedule.get_schedule(7)] == [501, 502]

    def test_only_includes_own_registrations(self, bookings, schedule):
        bookings.register(7, 501)
        bookings.register(8, 502)
        assert [s.id.value for s in schedule.get_schedule(7)] == [501]

    def test_orphaned_registration_is_dropped(self, bookings, schedule, catalog):
        bookings.register(7, 501)
        bookings.register(7, 502)
        catalog.delete(SessionId(501))
        assert [s.id.value for s in schedule.get_schedule(7)] == [502]

    def test_round_trip(self, bookings, schedule):
        bookings.register(7, 501)
        assert SessionId(501) in {s.id for s in schedule.get_schedule(7)}
        bookings.cancel(7, 501)
        assert schedule.get_schedule(7) == []

    def test_missing_user_id(self, schedule):
        with pytest.raises(InvalidRegistrationRequestError):
            schedule.get_schedule(None)

    def test_store_failure_is_generic_error(self, catalog):
        with pytest.raises(PersistenceError):
            ScheduleService(catalog, BrokenLedger()).get_schedule(7)


class TestCatalog:
    """Tests for CatalogService."""

    def test_lists_current_sessions_in_start_order(self, catalog, clock):
        sessions = CatalogService(catalog, clock=clock).list_current_sessions()
        assert [s.id.value for s in sessions] == [501, 801, 502]

    def test_catalog_groups_offerings(self, catalog, clock):
        grouped = CatalogService(catalog, clock=clock).get_catalog()
        (hyrox,) = grouped[Category.ADULT]
        assert hyrox.session_ids == (SessionId(501), SessionId(502))
        assert [o.key for o in grouped[Category.NEWS]] == ["Big Win"]

    def test_cached_list_is_refiltered_by_end_time(self, catalog, now):
        from django.core.cache import cache

        current = {"now": now}
        service = CatalogService(catalog, cache=cache, clock=lambda: current["now"])
        assert len(service.list_current_sessions()) == 3

        current["now"] = now + timedelta(hours=3)
        assert [s.id.value for s in service.list_current_sessions()] == [502]

    def test_store_failure_is_generic_error(self, clock):
        with pytest.raises(PersistenceError):
            CatalogService(BrokenSessionStore(), clock=clock).list_current_sessions()
