"""Serializers for booking requests and the Booking domain model."""

from rest_framework import serializers


class BookingInputSerializer(serializers.Serializer):
    """Raw booking fields as submitted by a client."""

    eventId = serializers.CharField(allow_blank=True, trim_whitespace=False)
    email = serializers.CharField(allow_blank=True, trim_whitespace=False)


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField(source="id.value")
    eventId = serializers.CharField(source="event_id.value")
    email = serializers.CharField(source="email.value")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
