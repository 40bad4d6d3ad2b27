"""
Train data model.

This module defines the scheduled train service that tickets are booked
against: its route endpoints, time-of-day schedule and seat counters.
"""

from dataclasses import dataclass, field
from datetime import time

from ..utils.helpers import format_time

DEFAULT_TOTAL_SEATS = 100


@dataclass(eq=False)
class Train:
    """
    A scheduled train service with a fixed seat capacity.

    The name identifies the train within its catalog. Only the booked-seat
    counter changes after creation, and only through ``book_seats`` and
    ``cancel_seats``. Equality is identity so that two trains that happen to
    share field values are never confused by the ledger.
    """

    name: str
    source: str
    destination: str
    departure_time: time
    arrival_time: time
    total_seats: int = DEFAULT_TOTAL_SEATS
    booked_seats: int = field(default=0, init=False)

    def __post_init__(self):
        """Validate train data after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Train name cannot be empty")
        if self.total_seats <= 0:
            raise ValueError(f"Train {self.name} must have a positive seat capacity")

    @property
    def available_seats(self) -> int:
        """Seats that can still be booked."""
        return self.total_seats - self.booked_seats

    @property
    def is_full(self) -> bool:
        """Check if every seat is booked."""
        return self.booked_seats >= self.total_seats

    def book_seats(self, num_seats: int) -> None:
        """
        Add seats to the booked count.

        Performs no capacity check; the caller checks availability first.
        """
        self.booked_seats += num_seats

    def cancel_seats(self, num_seats: int) -> None:
        """
        Release previously booked seats.

        Out-of-range counts are ignored and leave the train unchanged.
        """
        if 0 < num_seats <= self.booked_seats:
            self.booked_seats -= num_seats

    def format_departure_time(self) -> str:
        """Format departure time for display (HH:MM)."""
        return format_time(self.departure_time)

    def format_arrival_time(self) -> str:
        """Format arrival time for display (HH:MM)."""
        return format_time(self.arrival_time)

    def to_display_dict(self) -> dict:
        """Convert train data to dictionary for display purposes."""
        return {
            "name": self.name,
            "source": self.source,
            "destination": self.destination,
            "departure_time": self.format_departure_time(),
            "arrival_time": self.format_arrival_time(),
            "total_seats": self.total_seats,
            "booked_seats": self.booked_seats,
            "available_seats": self.available_seats,
            "is_full": self.is_full,
        }

    def __str__(self) -> str:
        return (
            f"{self.name} - From {self.source} to {self.destination} "
            f"({self.available_seats} seats available)"
        )
