"""Django ORM implementations of the event and ticket stores."""

from django.db.models import Q

from events import models
from events.domain import Event, EventId, EventQuery, Money, Stock, Ticket, TicketId
from events.stores.interfaces import EventStore, TicketStore


def to_domain_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        name=row.name,
        description=row.description,
        location=row.location,
        starts_at=row.starts_at,
        image_url=row.image_url or None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_domain_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.pk),
        event_id=EventId(row.event_id),
        name=row.name,
        price=Money(row.price),
        stock=Stock(row.stock),
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def _matching(self, query: EventQuery):
        rows = models.Event.objects.all()
        if query.search:
            rows = rows.filter(Q(name__icontains=query.search) | Q(location__icontains=query.search))
        if query.has_date_range:
            rows = rows.filter(starts_at__gte=query.starts_from, starts_at__lte=query.starts_until)
        return rows

    def list_events(self, query: EventQuery) -> list[Event]:
        rows = self._matching(query).order_by("-created_at", "-id")[query.offset : query.offset + query.limit]
        return [to_domain_event(row) for row in rows]

    def count_events(self, query: EventQuery) -> int:
        return self._matching(query).count()

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        return to_domain_event(row)

    def get_tickets_for_event(self, event_id: EventId) -> list[Ticket]:
        rows = models.Ticket.objects.filter(event_id=event_id.value).order_by("price", "id")
        return [to_domain_ticket(row) for row in rows]

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()


class DjangoTicketStore(TicketStore):
    """Database-backed ticket lookup using Django ORM."""

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        row = models.Ticket.objects.filter(pk=ticket_id.value).first()
        if row is None:
            return None
        return to_domain_ticket(row)
