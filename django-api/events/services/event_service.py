"""Event service - catalog business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from datetime import datetime, timezone

from events.domain import Event, EventId, EventPage, EventQuery, Ticket
from events.domain.errors import EventNotFoundError, InvalidDateRangeError, InvalidEventIdError
from events.stores.interfaces import EventStore

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _positive_int(value: str | int | None, default: int) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default


def _parse_date(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidDateRangeError() from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    @staticmethod
    def build_query(
        page: str | int | None = None,
        limit: str | int | None = None,
        search: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> EventQuery:
        """Normalize raw list parameters.

        Missing, non-numeric or sub-1 page/limit values fall back to 1 and 10.
        The date range is only used when both ends are given.

        Raises:
            InvalidDateRangeError: If both dates are given and one is not ISO 8601.
        """
        starts_from = starts_until = None
        if start_date and end_date:
            starts_from = _parse_date(start_date)
            starts_until = _parse_date(end_date)
        return EventQuery(
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT),
            search=(search or "").strip() or None,
            starts_from=starts_from,
            starts_until=starts_until,
        )

    def list_events(self, query: EventQuery | None = None) -> EventPage:
        """Return one page of events matching the query."""
        query = query or EventQuery()
        return EventPage(
            events=tuple(self._store.list_events(query)),
            page=query.page,
            limit=query.limit,
            total=self._store.count_events(query),
        )

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid integer ID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(self.parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_tickets_for_event(self, event_id: str) -> list[Ticket]:
        """Return tickets for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid integer ID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = self.parse_event_id(event_id)
        if not self._store.event_exists(parsed):
            raise EventNotFoundError(event_id)
        return self._store.get_tickets_for_event(parsed)

    @staticmethod
    def parse_event_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc
