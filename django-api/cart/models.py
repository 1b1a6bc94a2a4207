"""Django ORM models (persistence layer) for cart lines."""

from django.conf import settings
from django.db import models

from events.models import Ticket


class CartItem(models.Model):
    """Persistence model for a cart line."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="cart_items"
    )
    ticket = models.ForeignKey(Ticket, on_delete=models.CASCADE, related_name="cart_items")
    quantity = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "ticket"], name="unique_cart_item_per_ticket"),
        ]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="cart_item_user_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} - {self.ticket_id} x{self.quantity}"
