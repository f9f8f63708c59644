"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_REQUEST = "INVALID_REQUEST"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    SESSION_NOT_BOOKABLE = "SESSION_NOT_BOOKABLE"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidRegistrationRequestError(DomainError):
    """Raised when userId or sessionId is missing or malformed."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            code=ErrorCode.INVALID_REQUEST,
            message="Missing Data",
        )
        self.detail = detail


class SessionNotFoundError(DomainError):
    """Raised when a session id does not resolve."""

    def __init__(self, session_id: object) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )
        self.session_id = session_id


class SessionNotBookableError(DomainError):
    """Raised for NEWS items and sessions that have already ended."""

    def __init__(self, session_id: object, reason: str) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_BOOKABLE,
            message=reason,
        )
        self.session_id = session_id


class AlreadyRegisteredError(DomainError):
    """Raised when the ledger already holds this (user, session) pair."""

    def __init__(self, user_id: object = None, session_id: object = None) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="Already Registered",
        )
        self.user_id = user_id
        self.session_id = session_id


class PersistenceError(DomainError):
    """Raised for any store failure other than a uniqueness conflict."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_ERROR,
            message="Could not complete the request",
        )
