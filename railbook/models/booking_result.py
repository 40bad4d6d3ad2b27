"""
Typed booking failures.

Booking never raises for caller mistakes. A rejected booking is returned as
a ``BookingFailure`` value so the presentation layer can pick a message.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .ticket import Ticket


class BookingFailureReason(Enum):
    """Enumeration of reasons a booking can be rejected."""

    INVALID_TRAIN = "invalid_train"
    UNKNOWN_TRAIN = "unknown_train"
    INVALID_SEAT_COUNT = "invalid_seat_count"
    INSUFFICIENT_SEATS = "insufficient_seats"

    @property
    def is_validation_error(self) -> bool:
        """Validation failures, as opposed to capacity failures."""
        return self is not BookingFailureReason.INSUFFICIENT_SEATS


@dataclass(frozen=True)
class BookingFailure:
    """A rejected booking and the reason it was rejected."""

    reason: BookingFailureReason
    message: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.message


BookingResult = Union[Ticket, BookingFailure]
