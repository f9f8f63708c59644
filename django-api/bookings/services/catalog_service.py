"""Catalog service - reads the current session catalog and groups it."""

from collections.abc import Callable
from datetime import datetime

from django.core.cache.backends.base import BaseCache
from django.utils import timezone

from bookings.cache import SESSIONS_CACHE_KEY
from bookings.domain import Category, Offering, Session
from bookings.domain.errors import PersistenceError
from bookings.domain.grouping import build_catalog, current_sessions
from bookings.stores.interfaces import SessionStore, StoreError


class CatalogService:
    """Service for session catalog operations.

    When given a cache, the store result is kept for ``cache_ttl`` seconds.
    The end_time filter is applied again on every read, so a cached list
    never hands out a session that has since ended.
    """

    def __init__(
        self,
        store: SessionStore,
        cache: BaseCache | None = None,
        cache_ttl: int = 60,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._cache = cache
        self._cache_ttl = cache_ttl
        self._clock = clock

    def list_current_sessions(self) -> list[Session]:
        """Return sessions that have not ended, ordered by start_time.

        Raises:
            PersistenceError: If the store fails.
        """
        now = self._clock()
        sessions = self._cache.get(SESSIONS_CACHE_KEY) if self._cache is not None else None
        if sessions is None:
            try:
                sessions = self._store.list_current(now)
            except StoreError as exc:
                raise PersistenceError() from exc
            if self._cache is not None:
                self._cache.set(SESSIONS_CACHE_KEY, sessions, self._cache_ttl)
        return current_sessions(sessions, now)

    def get_catalog(self) -> dict[Category, list[Offering]]:
        """Return current sessions grouped into offerings per category."""
        return build_catalog(self.list_current_sessions())
