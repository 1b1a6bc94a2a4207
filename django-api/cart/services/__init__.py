from cart.services.cart_service import CartService


def build_cart_service() -> CartService:
    """Wire a CartService to the Django-backed stores."""
    from cart.stores.django_store import DjangoCartStore
    from events.stores.django_store import DjangoTicketStore

    return CartService(ticket_store=DjangoTicketStore(), cart_store=DjangoCartStore())


__all__ = ["CartService", "build_cart_service"]
