"""Cart primitives that enforce validity at creation time."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemId:
    """Unique identifier for a cart line."""

    value: int


@dataclass(frozen=True)
class Quantity:
    """Positive number of tickets on a cart line."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Quantity must be at least 1")

    def __add__(self, other: "Quantity") -> "Quantity":
        return Quantity(self.value + other.value)
