from bookings.client.booking_panel import ActionOutcome, BookingAction, BookingPanel, OutcomeKind
from bookings.client.booking_state import BookingStateCache
from bookings.client.gateway import (
    BookingGateway,
    GatewayError,
    HttpBookingGateway,
    LocalBookingGateway,
)

__all__ = [
    "ActionOutcome",
    "BookingAction",
    "BookingGateway",
    "BookingPanel",
    "BookingStateCache",
    "GatewayError",
    "HttpBookingGateway",
    "LocalBookingGateway",
    "OutcomeKind",
]
