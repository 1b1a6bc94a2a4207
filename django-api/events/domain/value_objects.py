"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        value = value.strip()
        if not value.isdigit():
            raise ValueError(f"Invalid identifier: {value!r}")
        return cls(value=int(value))


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket."""

    value: int


@dataclass(frozen=True)
class Money:
    """Price in the smallest currency unit."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def times(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Stock:
    """Non-negative number of tickets still available."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Stock cannot be negative")

    def covers(self, quantity: int) -> bool:
        return quantity <= self.value
