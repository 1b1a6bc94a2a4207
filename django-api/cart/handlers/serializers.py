"""Serializers for cart request bodies and responses."""

from rest_framework import serializers

from events.handlers.serializers import TicketSerializer

QUANTITY_ERRORS = {
    "min_value": "Quantity must be at least 1",
    "invalid": "Quantity must be a number",
    "required": "Quantity is required",
}


class AddToCartSerializer(serializers.Serializer):
    """Request body for POST /api/cart."""

    ticketId = serializers.IntegerField(
        error_messages={"invalid": "Ticket ID must be a number", "required": "Ticket ID is required"}
    )
    quantity = serializers.IntegerField(min_value=1, error_messages=QUANTITY_ERRORS)


class UpdateCartSerializer(serializers.Serializer):
    """Request body for PUT /api/cart/{id}."""

    quantity = serializers.IntegerField(min_value=1, error_messages=QUANTITY_ERRORS)


class CartLineSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="id.value")
    userId = serializers.IntegerField(source="user_id")
    ticketId = serializers.IntegerField(source="ticket_id.value")
    quantity = serializers.IntegerField()
    ticket = TicketSerializer()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class CartSerializer(serializers.Serializer):
    items = CartLineSerializer(source="lines", many=True)
    total = serializers.IntegerField(source="total.amount")
    totalItems = serializers.IntegerField(source="total_items")


class CheckoutItemSerializer(serializers.Serializer):
    ticketId = serializers.IntegerField(source="ticket_id.value")
    quantity = serializers.IntegerField()
    price = serializers.IntegerField(source="price.amount")
    subtotal = serializers.IntegerField(source="subtotal.amount")


class CheckoutOrderSerializer(serializers.Serializer):
    userId = serializers.IntegerField(source="user_id")
    items = CheckoutItemSerializer(many=True)
    total = serializers.IntegerField(source="total.amount")
    status = serializers.CharField(source="status.value")
