"""Maps domain errors to HTTP responses."""

from rest_framework import status
from rest_framework.response import Response

from bookings.domain.errors import DomainError, ErrorCode

STATUS_BY_CODE = {
    ErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SESSION_NOT_BOOKABLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SESSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.PERSISTENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": error.message, "code": error.code.value},
        status=STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )
