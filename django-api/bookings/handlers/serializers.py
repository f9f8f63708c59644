"""Serializers for transforming domain models to API responses and parsing requests."""

from rest_framework import serializers

from bookings.domain.value_objects import MAX_SESSION_ID


class SessionSerializer(serializers.Serializer):
    """Serializer for the Session domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    category = serializers.CharField(source="category.value")
    instructor = serializers.CharField()
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
    description = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)


class OfferingSerializer(serializers.Serializer):
    """Serializer for the Offering domain model."""

    key = serializers.CharField()
    category = serializers.CharField(source="category.value")
    bookable = serializers.BooleanField()
    defaultSessionId = serializers.SerializerMethodField()
    slots = SessionSerializer(many=True)

    def get_defaultSessionId(self, offering) -> int | None:
        slot = offering.default_slot
        return slot.id.value if slot is not None else None


class RegistrationRequestSerializer(serializers.Serializer):
    """Body of POST and DELETE /register."""

    userId = serializers.CharField(max_length=64)
    sessionId = serializers.IntegerField(min_value=1, max_value=MAX_SESSION_ID)
