"""Wires services to the Django ORM stores."""

from django.conf import settings
from django.core.cache import cache

from bookings.services.booking_service import BookingService
from bookings.services.catalog_service import CatalogService
from bookings.services.schedule_service import ScheduleService
from bookings.stores.django_store import DjangoRegistrationLedger, DjangoSessionStore


def catalog_service() -> CatalogService:
    return CatalogService(
        DjangoSessionStore(),
        cache=cache,
        cache_ttl=getattr(settings, "SESSIONS_CACHE_TTL", 60),
    )


def booking_service() -> BookingService:
    return BookingService(DjangoSessionStore(), DjangoRegistrationLedger())


def schedule_service() -> ScheduleService:
    return ScheduleService(DjangoSessionStore(), DjangoRegistrationLedger())
