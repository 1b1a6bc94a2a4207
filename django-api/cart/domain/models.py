"""Cart domain models.

CartLine mirrors a persisted row. Cart and CheckoutOrder are derived views
and are never stored by this module.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from cart.domain.value_objects import CartItemId
from events.domain import Money, Ticket, TicketId


class OrderStatus(str, Enum):
    PENDING = "pending"


@dataclass(frozen=True)
class CartLine:
    """One (user, ticket) pairing with a quantity.

    ``ticket`` is the ticket as read alongside the line, kept for callers
    that need price or name without a second lookup.
    """

    id: CartItemId
    user_id: int
    ticket_id: TicketId
    quantity: int
    ticket: Ticket
    created_at: datetime
    updated_at: datetime

    @property
    def subtotal(self) -> Money:
        return self.ticket.price.times(self.quantity)


@dataclass(frozen=True)
class Cart:
    """A user's cart lines with computed totals."""

    user_id: int
    lines: tuple[CartLine, ...] = ()

    @property
    def total(self) -> Money:
        total = Money(0)
        for line in self.lines:
            total = total + line.subtotal
        return total

    @property
    def total_items(self) -> int:
        # Distinct lines, not summed quantities.
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class CheckoutItem:
    ticket_id: TicketId
    quantity: int
    price: Money

    @property
    def subtotal(self) -> Money:
        return self.price.times(self.quantity)


@dataclass(frozen=True)
class CheckoutOrder:
    """Unpersisted order preview produced by checkout."""

    user_id: int
    items: tuple[CheckoutItem, ...]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
