"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from typing import Any, Callable

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from boxoffice.responses import error_response, success_response
from events.cache_keys import event_detail_key, event_list_key, event_tickets_key
from events.domain.errors import EventNotFoundError, InvalidDateRangeError, InvalidEventIdError
from events.handlers.serializers import EventSerializer, TicketSerializer
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


class CatalogView(APIView):
    permission_classes = [AllowAny]

    def cached(self, key: str, build: Callable[[EventService], Any], message: str) -> Response:
        data = cache.get(key)
        if data is None:
            try:
                data = build(get_event_service())
            except EventNotFoundError as exc:
                return error_response(exc.message, status.HTTP_404_NOT_FOUND)
            cache.set(key, data, settings.CACHE_TIMEOUT)
        return success_response(data, message)


class EventListView(CatalogView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        try:
            query = EventService.build_query(
                page=params.get("page"),
                limit=params.get("limit"),
                search=params.get("search"),
                start_date=params.get("startDate"),
                end_date=params.get("endDate"),
            )
        except InvalidDateRangeError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)

        def build(service: EventService) -> dict:
            result = service.list_events(query)
            return {
                "events": EventSerializer(result.events, many=True).data,
                "meta": {
                    "page": result.page,
                    "limit": result.limit,
                    "total": result.total,
                    "totalPages": result.total_pages,
                },
            }

        return self.cached(event_list_key(query), build, "Events retrieved successfully")


class EventDetailView(CatalogView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            parsed = EventService.parse_event_id(event_id)
        except InvalidEventIdError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)
        return self.cached(
            event_detail_key(parsed.value),
            lambda service: EventSerializer(service.get_event(event_id)).data,
            "Event retrieved successfully",
        )


class TicketListView(CatalogView):
    """Handler for GET /api/events/{event_id}/tickets"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            parsed = EventService.parse_event_id(event_id)
        except InvalidEventIdError as exc:
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)
        return self.cached(
            event_tickets_key(parsed.value),
            lambda service: TicketSerializer(service.get_tickets_for_event(event_id), many=True).data,
            "Tickets retrieved successfully",
        )
