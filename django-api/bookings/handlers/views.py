"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.domain.errors import DomainError, InvalidRegistrationRequestError
from bookings.handlers.errors import error_response
from bookings.handlers.serializers import (
    OfferingSerializer,
    RegistrationRequestSerializer,
    SessionSerializer,
)
from bookings.services import factory


class SessionListView(APIView):
    """Handler for GET /api/sessions"""

    def get(self, request: Request) -> Response:
        try:
            sessions = factory.catalog_service().list_current_sessions()
        except DomainError as error:
            return error_response(error)
        return Response(SessionSerializer(sessions, many=True).data)


class CatalogView(APIView):
    """Handler for GET /api/catalog"""

    def get(self, request: Request) -> Response:
        try:
            catalog = factory.catalog_service().get_catalog()
        except DomainError as error:
            return error_response(error)
        return Response(
            [
                {
                    "category": category.value,
                    "offerings": OfferingSerializer(offerings, many=True).data,
                }
                for category, offerings in catalog.items()
            ]
        )


class RegistrationView(APIView):
    """Handler for POST and DELETE /api/register"""

    def post(self, request: Request) -> Response:
        try:
            user_id, session_id = self._parse(request)
            factory.booking_service().register(user_id, session_id)
        except DomainError as error:
            return error_response(error)
        return Response({"success": True})

    def delete(self, request: Request) -> Response:
        try:
            user_id, session_id = self._parse(request)
            factory.booking_service().cancel(user_id, session_id)
        except DomainError as error:
            return error_response(error)
        return Response({"success": True})

    @staticmethod
    def _parse(request: Request) -> tuple[str, int]:
        serializer = RegistrationRequestSerializer(data=request.data)
        if not serializer.is_valid():
            raise InvalidRegistrationRequestError(str(serializer.errors))
        return serializer.validated_data["userId"], serializer.validated_data["sessionId"]


class MyScheduleView(APIView):
    """Handler for GET /api/my-schedule?userId=<id>"""

    def get(self, request: Request) -> Response:
        try:
            schedule = factory.schedule_service().get_schedule(
                request.query_params.get("userId")
            )
        except DomainError as error:
            return error_response(error)
        return Response(SessionSerializer(schedule, many=True).data)
