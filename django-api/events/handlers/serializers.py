"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    location = serializers.CharField()
    startsAt = serializers.DateTimeField(source="starts_at")
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.IntegerField(source="id.value")
    eventId = serializers.IntegerField(source="event_id.value")
    name = serializers.CharField()
    price = serializers.IntegerField(source="price.amount")
    stock = serializers.IntegerField(source="stock.value")
