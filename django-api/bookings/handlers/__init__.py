from bookings.handlers.views import (
    CatalogView,
    MyScheduleView,
    RegistrationView,
    SessionListView,
)

__all__ = ["CatalogView", "MyScheduleView", "RegistrationView", "SessionListView"]
