"""Gateways the client side uses to reach the booking API.

HttpBookingGateway talks JSON over HTTP with httpx and maps status codes
back onto the domain errors. LocalBookingGateway calls the services
in-process.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Self

import httpx
from django.utils.dateparse import parse_datetime

from bookings.domain import Category, Session, SessionId
from bookings.domain.errors import (
    AlreadyRegisteredError,
    ErrorCode,
    InvalidRegistrationRequestError,
    PersistenceError,
    SessionNotBookableError,
    SessionNotFoundError,
)
from bookings.services import BookingService, CatalogService, ScheduleService

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000/api"
USER_AGENT = "clubhouse-bookings/client"


class GatewayError(Exception):
    """The request never produced an API response (timeout, connection error)."""


class BookingGateway(ABC):
    """What the client needs from the booking API."""

    @abstractmethod
    def list_sessions(self) -> list[Session]: ...

    @abstractmethod
    def register(self, user_id: str, session_id: SessionId) -> None: ...

    @abstractmethod
    def cancel(self, user_id: str, session_id: SessionId) -> None: ...

    @abstractmethod
    def get_schedule(self, user_id: str) -> list[Session]: ...


def session_from_json(data: dict[str, Any]) -> Session:
    return Session(
        id=SessionId(int(data["id"])),
        title=data["title"],
        category=Category(data["category"]),
        instructor=data.get("instructor") or "",
        start_time=parse_datetime(data["start_time"]),
        end_time=parse_datetime(data["end_time"]),
        description=data.get("description") or "",
        image_url=data.get("image_url"),
    )


def error_from_response(response: httpx.Response) -> Exception:
    """Rebuild the domain error an API error response stands for."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    code = body.get("code")
    message = body.get("error") or response.reason_phrase

    if response.status_code == 409 or code == ErrorCode.ALREADY_REGISTERED.value:
        return AlreadyRegisteredError()
    if response.status_code == 404:
        return SessionNotFoundError(None)
    if code == ErrorCode.SESSION_NOT_BOOKABLE.value:
        return SessionNotBookableError(None, message)
    if response.status_code == 400:
        return InvalidRegistrationRequestError(message)
    return PersistenceError()


class HttpBookingGateway(BookingGateway):
    """Booking API client over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"User-Agent": USER_AGENT},
        )

    @classmethod
    def from_env(cls) -> Self:
        return cls(
            base_url=os.getenv("BOOKINGS_API_URL", DEFAULT_API_URL),
            timeout=float(os.getenv("BOOKINGS_API_TIMEOUT", "10")),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list_sessions(self) -> list[Session]:
        response = self._request("GET", "/sessions")
        return [session_from_json(item) for item in response.json()]

    def register(self, user_id: str, session_id: SessionId) -> None:
        self._request(
            "POST", "/register", json={"userId": user_id, "sessionId": session_id.value}
        )

    def cancel(self, user_id: str, session_id: SessionId) -> None:
        self._request(
            "DELETE", "/register", json={"userId": user_id, "sessionId": session_id.value}
        )

    def get_schedule(self, user_id: str) -> list[Session]:
        response = self._request("GET", "/my-schedule", params={"userId": user_id})
        return [session_from_json(item) for item in response.json()]

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise GatewayError("Network error connecting to server.") from exc
        if response.is_success:
            return response
        logger.debug("%s %s -> %s", method, path, response.status_code)
        raise error_from_response(response)


class LocalBookingGateway(BookingGateway):
    """Calls the services directly, without HTTP in between."""

    def __init__(
        self,
        catalog: CatalogService,
        bookings: BookingService,
        schedule: ScheduleService,
    ) -> None:
        self._catalog = catalog
        self._bookings = bookings
        self._schedule = schedule

    def list_sessions(self) -> list[Session]:
        return self._catalog.list_current_sessions()

    def register(self, user_id: str, session_id: SessionId) -> None:
        self._bookings.register(user_id, session_id.value)

    def cancel(self, user_id: str, session_id: SessionId) -> None:
        self._bookings.cancel(user_id, session_id.value)

    def get_schedule(self, user_id: str) -> list[Session]:
        return self._schedule.get_schedule(user_id)
