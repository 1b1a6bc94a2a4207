"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: Enum
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidDateRangeError(DomainError):
    """Raised when a startDate or endDate filter cannot be parsed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE_RANGE,
            message="Invalid date range",
        )
