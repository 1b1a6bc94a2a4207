from events.domain.models import Event, EventPage, EventQuery, Ticket
from events.domain.value_objects import EventId, Money, Stock, TicketId

__all__ = [
    "Event",
    "EventPage",
    "EventQuery",
    "Ticket",
    "EventId",
    "TicketId",
    "Money",
    "Stock",
]
