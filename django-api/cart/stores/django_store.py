"""Django ORM implementation of the CartStore."""

from cart import models
from cart.domain import CartItemId, CartLine
from cart.stores.interfaces import CartStore
from events.domain import TicketId
from events.stores.django_store import to_domain_ticket


def to_domain_line(row: models.CartItem) -> CartLine:
    return CartLine(
        id=CartItemId(row.pk),
        user_id=row.user_id,
        ticket_id=TicketId(row.ticket_id),
        quantity=row.quantity,
        ticket=to_domain_ticket(row.ticket),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoCartStore(CartStore):
    """Database-backed cart store using Django ORM."""

    def _lines(self):
        return models.CartItem.objects.select_related("ticket")

    def _get_row(self, cart_item_id: CartItemId, user_id: int) -> models.CartItem:
        return self._lines().get(pk=cart_item_id.value, user_id=user_id)

    def find_by_user_and_ticket(self, user_id: int, ticket_id: TicketId) -> CartLine | None:
        row = self._lines().filter(user_id=user_id, ticket_id=ticket_id.value).first()
        if row is None:
            return None
        return to_domain_line(row)

    def create(self, user_id: int, ticket_id: TicketId, quantity: int) -> CartLine:
        row = models.CartItem.objects.create(
            user_id=user_id, ticket_id=ticket_id.value, quantity=quantity
        )
        return to_domain_line(self._lines().get(pk=row.pk))

    def find_by_user(self, user_id: int) -> list[CartLine]:
        rows = self._lines().filter(user_id=user_id).order_by("-created_at", "-id")
        return [to_domain_line(row) for row in rows]

    def find_by_id_and_user(self, cart_item_id: CartItemId, user_id: int) -> CartLine | None:
        row = self._lines().filter(pk=cart_item_id.value, user_id=user_id).first()
        if row is None:
            return None
        return to_domain_line(row)

    def update_quantity(self, cart_item_id: CartItemId, user_id: int, quantity: int) -> CartLine:
        row = self._get_row(cart_item_id, user_id)
        row.quantity = quantity
        row.save(update_fields=["quantity", "updated_at"])
        return to_domain_line(row)

    def delete(self, cart_item_id: CartItemId, user_id: int) -> CartLine:
        row = self._get_row(cart_item_id, user_id)
        line = to_domain_line(row)
        row.delete()
        return line

    def clear(self, user_id: int) -> int:
        deleted, _ = models.CartItem.objects.filter(user_id=user_id).delete()
        return deleted
