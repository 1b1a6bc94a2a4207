"""HTTP handlers (views) - handle HTTP concerns only.

Every cart domain error is a client error and maps to 400 with its message.
Anything else propagates and becomes a 500.
"""

from functools import wraps
from typing import Callable

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from boxoffice.responses import error_response, first_error_message, success_response
from cart.domain.errors import CartError
from cart.handlers.serializers import (
    AddToCartSerializer,
    CartLineSerializer,
    CartSerializer,
    CheckoutOrderSerializer,
    UpdateCartSerializer,
)
from cart.services import CartService, build_cart_service


def maps_cart_errors(handler: Callable[..., Response]) -> Callable[..., Response]:
    """Turn any CartError raised by the handler into a 400 error response."""

    @wraps(handler)
    def wrapper(*args, **kwargs) -> Response:
        try:
            return handler(*args, **kwargs)
        except CartError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)

    return wrapper


class CartView(APIView):
    permission_classes = [IsAuthenticated]

    def get_service(self) -> CartService:
        return build_cart_service()


class CartListView(CartView):
    """Handler for GET, POST and DELETE /api/cart"""

    def get(self, request: Request) -> Response:
        cart = self.get_service().get_cart(request.user.pk)
        return success_response(CartSerializer(cart).data, "Cart retrieved successfully")

    @maps_cart_errors
    def post(self, request: Request) -> Response:
        body = AddToCartSerializer(data=request.data)
        if not body.is_valid():
            return error_response(first_error_message(body.errors))
        line = self.get_service().add_to_cart(
            request.user.pk, body.validated_data["ticketId"], body.validated_data["quantity"]
        )
        return success_response(
            CartLineSerializer(line).data,
            "Item added to cart successfully",
            status.HTTP_201_CREATED,
        )

    def delete(self, request: Request) -> Response:
        removed = self.get_service().clear_cart(request.user.pk)
        return success_response({"removed": removed}, "Cart cleared successfully")


class CartItemView(CartView):
    """Handler for PUT and DELETE /api/cart/{cart_item_id}"""

    @maps_cart_errors
    def put(self, request: Request, cart_item_id: int) -> Response:
        body = UpdateCartSerializer(data=request.data)
        if not body.is_valid():
            return error_response(first_error_message(body.errors))
        line = self.get_service().update_quantity(
            request.user.pk, cart_item_id, body.validated_data["quantity"]
        )
        return success_response(CartLineSerializer(line).data, "Cart quantity updated successfully")

    @maps_cart_errors
    def delete(self, request: Request, cart_item_id: int) -> Response:
        self.get_service().remove_from_cart(request.user.pk, cart_item_id)
        return success_response(None, "Item removed from cart successfully")


class CheckoutView(CartView):
    """Handler for POST /api/cart/checkout"""

    @maps_cart_errors
    def post(self, request: Request) -> Response:
        order = self.get_service().checkout(request.user.pk)
        return success_response(CheckoutOrderSerializer(order).data, "Checkout successful")
