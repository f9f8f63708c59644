from bookings.domain.models import Offering, Registration, Session
from bookings.domain.value_objects import Category, SessionId, UserId

__all__ = [
    "Session",
    "Registration",
    "Offering",
    "Category",
    "SessionId",
    "UserId",
]
