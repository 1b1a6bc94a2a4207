"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    name = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    starts_at = models.DateTimeField()
    image_url = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="event_created_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for tickets.

    ``price`` is stored in the smallest currency unit.
    """

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    name = models.CharField(max_length=100)
    price = models.PositiveBigIntegerField()
    stock = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["price", "id"]
        indexes = [
            models.Index(fields=["event"], name="ticket_event_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"
