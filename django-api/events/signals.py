"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache_keys import bump_list_generation, event_detail_key, event_tickets_key
from events.models import Event, Ticket


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    bump_list_generation()
    cache.delete_many([event_detail_key(instance.pk), event_tickets_key(instance.pk)])


@receiver([post_save, post_delete], sender=Ticket)
def invalidate_ticket_cache(sender, instance, **kwargs):
    """Invalidate the ticket list of the owning event."""
    cache.delete(event_tickets_key(instance.event_id))
