from bookings.services.booking_service import BookingService
from bookings.services.catalog_service import CatalogService
from bookings.services.schedule_service import ScheduleService

__all__ = ["BookingService", "CatalogService", "ScheduleService"]
