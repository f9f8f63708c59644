from django.urls import path

from bookings.handlers import CatalogView, MyScheduleView, RegistrationView, SessionListView

urlpatterns = [
    path("sessions", SessionListView.as_view(), name="session-list"),
    path("catalog", CatalogView.as_view(), name="catalog"),
    path("register", RegistrationView.as_view(), name="register"),
    path("my-schedule", MyScheduleView.as_view(), name="my-schedule"),
]
