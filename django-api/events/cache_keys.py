"""Cache keys for catalog responses.

Detail and ticket keys are built from parsed integer ids so they match the
keys cleared by the model signals. List keys embed a generation number that
the signals bump, which drops every filtered variant at once.
"""

from urllib.parse import urlencode

from django.core.cache import cache

from events.domain import EventQuery

LIST_GENERATION_KEY = "events:list:generation"


def list_generation() -> int:
    return cache.get_or_set(LIST_GENERATION_KEY, 0, None)


def bump_list_generation() -> None:
    try:
        cache.incr(LIST_GENERATION_KEY)
    except ValueError:
        cache.set(LIST_GENERATION_KEY, 1, None)


def event_list_key(query: EventQuery) -> str:
    params = urlencode(
        {
            "page": query.page,
            "limit": query.limit,
            "search": query.search or "",
            "from": query.starts_from.isoformat() if query.has_date_range else "",
            "until": query.starts_until.isoformat() if query.has_date_range else "",
        }
    )
    return f"events:list:{list_generation()}:{params}"


def event_detail_key(event_id: int) -> str:
    return f"events:{event_id}"


def event_tickets_key(event_id: int) -> str:
    return f"events:{event_id}:tickets"
