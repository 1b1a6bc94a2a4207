from cart.domain.models import Cart, CartLine, CheckoutItem, CheckoutOrder, OrderStatus
from cart.domain.value_objects import CartItemId, Quantity

__all__ = [
    "Cart",
    "CartLine",
    "CheckoutItem",
    "CheckoutOrder",
    "OrderStatus",
    "CartItemId",
    "Quantity",
]
