from django.contrib import admin

from cart.models import CartItem


@admin.register(CartItem)
class CartItemAdmin(admin.ModelAdmin):
    list_display = ["user", "ticket", "quantity", "updated_at"]
    list_filter = ["ticket__event"]
    search_fields = ["user__username", "ticket__name"]
