from django.urls import path

from cart.handlers import CartItemView, CartListView, CheckoutView

urlpatterns = [
    path("cart", CartListView.as_view(), name="cart"),
    path("cart/checkout", CheckoutView.as_view(), name="cart-checkout"),
    path("cart/<int:cart_item_id>", CartItemView.as_view(), name="cart-item"),
]
