from cart.handlers.views import CartItemView, CartListView, CheckoutView

__all__ = ["CartListView", "CartItemView", "CheckoutView"]
