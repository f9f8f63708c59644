"""Cache keys for the session catalog.

Only the current-session list is cached. Registrations and schedules are
always read from the ledger.
"""

import logging

from django.core.cache import cache

logger = logging.getLogger(__name__)

SESSIONS_CACHE_KEY = "sessions:current"


def invalidate_sessions() -> None:
    logger.debug("Invalidating %s", SESSIONS_CACHE_KEY)
    cache.delete(SESSIONS_CACHE_KEY)
