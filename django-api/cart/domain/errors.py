"""Domain errors raised by the cart service.

Messages are part of the API contract and are returned to clients verbatim.
"""

from enum import Enum

from events.domain.errors import DomainError


class ErrorCode(Enum):
    """Cart error codes."""

    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    CART_ITEM_NOT_FOUND = "CART_ITEM_NOT_FOUND"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    EMPTY_CART = "EMPTY_CART"
    INVALID_QUANTITY = "INVALID_QUANTITY"


class CartError(DomainError):
    """Base class for cart errors."""


class NotFoundError(CartError):
    """A ticket or cart line does not exist, or is not the caller's."""


class TicketNotFoundError(NotFoundError):
    def __init__(self, ticket_id: int) -> None:
        super().__init__(code=ErrorCode.TICKET_NOT_FOUND, message="Ticket not found")
        self.ticket_id = ticket_id


class CartItemNotFoundError(NotFoundError):
    def __init__(self, cart_item_id: int) -> None:
        super().__init__(code=ErrorCode.CART_ITEM_NOT_FOUND, message="Cart item not found")
        self.cart_item_id = cart_item_id


class InsufficientStockError(CartError):
    """Requested quantity exceeds the ticket's available stock."""

    def __init__(self, ticket_name: str | None = None) -> None:
        message = "Not enough tickets available"
        if ticket_name is not None:
            message = f"{message} for {ticket_name}"
        super().__init__(code=ErrorCode.INSUFFICIENT_STOCK, message=message)
        self.ticket_name = ticket_name


class EmptyCartError(CartError):
    def __init__(self, user_id: int) -> None:
        super().__init__(code=ErrorCode.EMPTY_CART, message="Cart is empty")
        self.user_id = user_id


class InvalidQuantityError(CartError):
    def __init__(self, quantity: int) -> None:
        super().__init__(code=ErrorCode.INVALID_QUANTITY, message="Quantity must be at least 1")
        self.quantity = quantity
