"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from bookings.domain import Category, Session, SessionId
from bookings.stores.memory_store import InMemoryRegistrationLedger, InMemorySessionStore

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def make_session(now):
    """Build a domain Session starting ``hours`` after the fixed clock."""

    def _make(
        id: int,
        title: str = "Hyrox",
        category: Category = Category.ADULT,
        instructor: str = "Coach Mia",
        hours: float = 1,
        duration: float = 1,
    ) -> Session:
        start = now + timedelta(hours=hours)
        return Session(
            id=SessionId(id),
            title=title,
            category=category,
            instructor=instructor,
            start_time=start,
            end_time=start + timedelta(hours=duration),
        )

    return _make


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def ledger(clock) -> InMemoryRegistrationLedger:
    return InMemoryRegistrationLedger(clock=clock)
