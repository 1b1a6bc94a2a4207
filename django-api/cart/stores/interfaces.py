"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every lookup that takes
a user id treats ownership as part of the key.
"""

from abc import ABC, abstractmethod

from cart.domain import CartItemId, CartLine
from events.domain import TicketId


class CartStore(ABC):
    """Interface for cart line persistence operations."""

    @abstractmethod
    def find_by_user_and_ticket(self, user_id: int, ticket_id: TicketId) -> CartLine | None:
        """Return the user's line for a ticket, or None."""
        ...

    @abstractmethod
    def create(self, user_id: int, ticket_id: TicketId, quantity: int) -> CartLine:
        """Create a new line and return it."""
        ...

    @abstractmethod
    def find_by_user(self, user_id: int) -> list[CartLine]:
        """Return all of the user's lines, newest first."""
        ...

    @abstractmethod
    def find_by_id_and_user(self, cart_item_id: CartItemId, user_id: int) -> CartLine | None:
        """Return a line only if it exists and belongs to the user."""
        ...

    @abstractmethod
    def update_quantity(self, cart_item_id: CartItemId, user_id: int, quantity: int) -> CartLine:
        """Set the quantity of an existing line and return the updated line."""
        ...

    @abstractmethod
    def delete(self, cart_item_id: CartItemId, user_id: int) -> CartLine:
        """Delete a line and return its state before deletion."""
        ...

    @abstractmethod
    def clear(self, user_id: int) -> int:
        """Delete all of the user's lines and return how many were removed."""
        ...
