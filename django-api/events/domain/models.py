"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, Money, Stock, TicketId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    location: str
    starts_at: datetime
    image_url: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket.

    ``stock`` is authoritative only at the instant it was read.
    """

    id: TicketId
    event_id: EventId
    name: str
    price: Money
    stock: Stock
    created_at: datetime


@dataclass(frozen=True)
class EventQuery:
    """Filters and pagination for listing events.

    The date range applies only when both ends are set.
    """

    page: int = 1
    limit: int = 10
    search: str | None = None
    starts_from: datetime | None = None
    starts_until: datetime | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def has_date_range(self) -> bool:
        return self.starts_from is not None and self.starts_until is not None


@dataclass(frozen=True)
class EventPage:
    """One page of events plus the total number of matches."""

    events: tuple[Event, ...]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit)
