"""Cart service - all cart and checkout business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

The service holds no state between calls. Stock is only ever read, and no
locking is done here: two concurrent adds for the same ticket can both pass
the stock check.
"""

import logging

from cart.domain import Cart, CartItemId, CartLine, CheckoutItem, CheckoutOrder, OrderStatus, Quantity
from cart.domain.errors import (
    CartItemNotFoundError,
    EmptyCartError,
    InsufficientStockError,
    InvalidQuantityError,
    TicketNotFoundError,
)
from cart.stores.interfaces import CartStore
from events.domain import Money, Ticket, TicketId
from events.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)


class CartService:
    """Service for cart and checkout operations."""

    def __init__(self, ticket_store: TicketStore, cart_store: CartStore) -> None:
        self._tickets = ticket_store
        self._carts = cart_store

    def add_to_cart(self, user_id: int, ticket_id: int, quantity: int) -> CartLine:
        """Add tickets to the user's cart, merging into an existing line.

        The checks run in a fixed order: ticket exists, requested quantity
        fits in stock, then the existing line is merged or a new one created.

        Raises:
            InvalidQuantityError: If quantity is less than 1.
            TicketNotFoundError: If the ticket does not exist.
            InsufficientStockError: If the requested or merged quantity
                exceeds the ticket's stock.
        """
        requested = self._quantity(quantity)
        ticket = self._get_ticket(TicketId(ticket_id))

        if not ticket.stock.covers(requested.value):
            logger.warning(
                "Rejected add of %s x ticket %s for user %s: stock %s",
                requested.value, ticket_id, user_id, ticket.stock.value,
            )
            raise InsufficientStockError()

        existing = self._carts.find_by_user_and_ticket(user_id, ticket.id)
        if existing is None:
            line = self._carts.create(user_id, ticket.id, requested.value)
            logger.info("Created cart line %s for user %s", line.id.value, user_id)
            return line

        merged = Quantity(existing.quantity) + requested
        if not ticket.stock.covers(merged.value):
            logger.warning(
                "Rejected merge to %s x ticket %s for user %s: stock %s",
                merged.value, ticket_id, user_id, ticket.stock.value,
            )
            raise InsufficientStockError()

        line = self._carts.update_quantity(existing.id, user_id, merged.value)
        logger.info(
            "Merged cart line %s for user %s: %s -> %s",
            line.id.value, user_id, existing.quantity, merged.value,
        )
        return line

    def get_cart(self, user_id: int) -> Cart:
        """Return the user's cart with its total and line count."""
        return Cart(user_id=user_id, lines=tuple(self._carts.find_by_user(user_id)))

    def update_quantity(self, user_id: int, cart_item_id: int, quantity: int) -> CartLine:
        """Replace the quantity of one of the user's cart lines.

        Raises:
            InvalidQuantityError: If quantity is less than 1.
            CartItemNotFoundError: If the line does not exist or belongs to
                another user.
            TicketNotFoundError: If the line's ticket no longer exists.
            InsufficientStockError: If quantity exceeds the ticket's stock.
        """
        new_quantity = self._quantity(quantity)
        line = self._get_line(user_id, CartItemId(cart_item_id))
        ticket = self._get_ticket(line.ticket_id)

        if not ticket.stock.covers(new_quantity.value):
            logger.warning(
                "Rejected update of cart line %s to %s: stock %s",
                cart_item_id, new_quantity.value, ticket.stock.value,
            )
            raise InsufficientStockError()

        updated = self._carts.update_quantity(line.id, user_id, new_quantity.value)
        logger.info(
            "Updated cart line %s for user %s: %s -> %s",
            cart_item_id, user_id, line.quantity, new_quantity.value,
        )
        return updated

    def remove_from_cart(self, user_id: int, cart_item_id: int) -> CartLine:
        """Delete one of the user's cart lines and return it.

        Raises:
            CartItemNotFoundError: If the line does not exist or belongs to
                another user.
        """
        line = self._get_line(user_id, CartItemId(cart_item_id))
        removed = self._carts.delete(line.id, user_id)
        logger.info("Removed cart line %s for user %s", cart_item_id, user_id)
        return removed

    def clear_cart(self, user_id: int) -> int:
        """Delete every line in the user's cart and return the count."""
        removed = self._carts.clear(user_id)
        logger.info("Cleared %s cart lines for user %s", removed, user_id)
        return removed

    def checkout(self, user_id: int) -> CheckoutOrder:
        """Validate the cart against live stock and build a pending order.

        Prices come from the cart as read at the start of checkout. Stock is
        read again per line and the first line that no longer fits fails the
        whole checkout. Nothing is written.

        Raises:
            EmptyCartError: If the cart has no lines.
            TicketNotFoundError: If a line's ticket no longer exists.
            InsufficientStockError: Naming the first ticket whose stock is
                below the line quantity.
        """
        cart = self.get_cart(user_id)
        if cart.is_empty:
            raise EmptyCartError(user_id)

        for line in cart.lines:
            current = self._get_ticket(line.ticket_id)
            if not current.stock.covers(line.quantity):
                logger.warning(
                    "Checkout for user %s failed on ticket %s: %s requested, %s available",
                    user_id, line.ticket_id.value, line.quantity, current.stock.value,
                )
                raise InsufficientStockError(current.name)

        items = tuple(
            CheckoutItem(ticket_id=line.ticket_id, quantity=line.quantity, price=line.ticket.price)
            for line in cart.lines
        )
        total = Money(0)
        for item in items:
            total = total + item.subtotal

        logger.info(
            "Built checkout for user %s: %s lines, total %s", user_id, len(items), total
        )
        return CheckoutOrder(user_id=user_id, items=items, total=total, status=OrderStatus.PENDING)

    def _quantity(self, quantity: int) -> Quantity:
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise InvalidQuantityError(quantity)
        try:
            return Quantity(quantity)
        except ValueError as exc:
            raise InvalidQuantityError(quantity) from exc

    def _get_ticket(self, ticket_id: TicketId) -> Ticket:
        ticket = self._tickets.get_ticket(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id.value)
        return ticket

    def _get_line(self, user_id: int, cart_item_id: CartItemId) -> CartLine:
        line = self._carts.find_by_id_and_user(cart_item_id, user_id)
        if line is None:
            raise CartItemNotFoundError(cart_item_id.value)
        return line
