"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from cart.services import CartService
from tests.fakes import InMemoryCartStore, InMemoryTicketStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def ticket_store() -> InMemoryTicketStore:
    return InMemoryTicketStore()


@pytest.fixture
def cart_store(ticket_store: InMemoryTicketStore) -> InMemoryCartStore:
    return InMemoryCartStore(ticket_store)


@pytest.fixture
def cart_service(ticket_store: InMemoryTicketStore, cart_store: InMemoryCartStore) -> CartService:
    return CartService(ticket_store=ticket_store, cart_store=cart_store)


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="karina", password="password")


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username="winter", password="password")


@pytest.fixture
def auth_client(api_client: APIClient, user) -> APIClient:
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def event():
    from events.models import Event

    return Event.objects.create(
        name="Summer Fest 2025",
        description="Three days of live music",
        location="Jakarta",
        starts_at=datetime(2025, 12, 31, 19, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_db_ticket(event):
    from events.models import Ticket

    def factory(name: str = "VIP Ticket", price: int = 500000, stock: int = 100):
        return Ticket.objects.create(event=event, name=name, price=price, stock=stock)

    return factory
