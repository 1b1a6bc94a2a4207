"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId, EventQuery, Ticket, TicketId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, query: EventQuery) -> list[Event]:
        """Return one page of matching events ordered by created_at descending."""
        ...

    @abstractmethod
    def count_events(self, query: EventQuery) -> int:
        """Return how many events match the query's filters, ignoring pagination."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_tickets_for_event(self, event_id: EventId) -> list[Ticket]:
        """Return all tickets for an event, ordered by price ascending."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...


class TicketStore(ABC):
    """Ticket lookup used by the cart.

    Implementations must read stock fresh on every call.
    """

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...
