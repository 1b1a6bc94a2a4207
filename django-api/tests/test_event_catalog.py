"""Integration tests for the event catalog API.

Run with: pytest tests/test_event_catalog.py -v
"""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from events.models import Event


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_returns_results(self, api_client: APIClient, event):
        """Given events exist, returns them newest first."""
        newer = Event.objects.create(
            name="Winter Fest",
            description="Indoor stage",
            location="Bandung",
            starts_at=datetime(2026, 1, 10, tzinfo=timezone.utc),
        )

        response = api_client.get("/api/events")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert [item["id"] for item in body["data"]["events"]] == [newer.pk, event.pk]
        assert body["data"]["events"][1]["location"] == "Jakarta"
        assert body["data"]["meta"] == {"page": 1, "limit": 10, "total": 2, "totalPages": 1}

    def test_list_events_empty_catalog(self, api_client: APIClient):
        """Given no events, returns empty list."""
        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "events": [],
            "meta": {"page": 1, "limit": 10, "total": 0, "totalPages": 0},
        }

    def test_page_and_limit(self, api_client: APIClient, event):
        newer = Event.objects.create(
            name="Winter Fest",
            description="Indoor stage",
            location="Bandung",
            starts_at=datetime(2026, 1, 10, tzinfo=timezone.utc),
        )

        first = api_client.get("/api/events?page=1&limit=1").json()["data"]
        second = api_client.get("/api/events?page=2&limit=1").json()["data"]

        assert [item["id"] for item in first["events"]] == [newer.pk]
        assert [item["id"] for item in second["events"]] == [event.pk]
        assert second["meta"] == {"page": 2, "limit": 1, "total": 2, "totalPages": 2}

    @pytest.mark.parametrize("params", ["page=abc&limit=abc", "page=0&limit=0", "page=-3&limit=-1"])
    def test_invalid_page_and_limit_use_defaults(self, api_client: APIClient, event, params):
        response = api_client.get(f"/api/events?{params}")

        assert response.status_code == 200
        assert response.json()["data"]["meta"] == {"page": 1, "limit": 10, "total": 1, "totalPages": 1}

    def test_search_without_match(self, api_client: APIClient, event):
        response = api_client.get("/api/events?page=1&limit=1&search=zzz")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "events": [],
            "meta": {"page": 1, "limit": 1, "total": 0, "totalPages": 0},
        }

    def test_search_by_location_ignores_case(self, api_client: APIClient, event):
        response = api_client.get("/api/events?search=jakarta")

        assert [item["id"] for item in response.json()["data"]["events"]] == [event.pk]

    def test_date_range(self, api_client: APIClient, event):
        inside = api_client.get("/api/events?startDate=2025-12-01&endDate=2026-01-01").json()["data"]
        outside = api_client.get("/api/events?startDate=2026-01-01&endDate=2026-02-01").json()["data"]

        assert inside["meta"]["total"] == 1
        assert outside["meta"]["total"] == 0

    def test_malformed_date_range(self, api_client: APIClient, event):
        response = api_client.get("/api/events?startDate=soon&endDate=2026-01-01")

        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "Invalid date range"}


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, event):
        response = api_client.get(f"/api/events/{event.pk}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == event.pk
        assert data["name"] == "Summer Fest 2025"
        assert data["imageUrl"] is None

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/99999")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "Event not found"}

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-an-id")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid event ID format"


@pytest.mark.django_db
class TestTicketList:
    """Tests for GET /api/events/{id}/tickets"""

    def test_list_tickets_ordered_by_price(self, api_client: APIClient, event, make_db_ticket):
        vip = make_db_ticket(name="VIP", price=500000, stock=10)
        regular = make_db_ticket(name="Regular", price=200000, stock=90)

        response = api_client.get(f"/api/events/{event.pk}/tickets")

        assert response.status_code == 200
        assert response.json()["data"] == [
            {"id": regular.pk, "eventId": event.pk, "name": "Regular", "price": 200000, "stock": 90},
            {"id": vip.pk, "eventId": event.pk, "name": "VIP", "price": 500000, "stock": 10},
        ]

    def test_list_tickets_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/99999/tickets")

        assert response.status_code == 404
