"""
Ticket data model.

A ticket records one successful booking against a train. Tickets are
immutable: cancelling a booking removes the ticket from the ledger rather
than changing it.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from .train import Train


def _new_ticket_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True, eq=False)
class Ticket:
    """
    Immutable data class representing a single reservation.

    The ticket shares its train with the catalog and other tickets; it does
    not own it. Two tickets with the same train and seat count are still
    different reservations, so equality is identity.
    """

    train: Train
    num_seats: int
    need_ramp: bool = False
    need_wheelchair: bool = False
    ticket_id: str = field(default_factory=_new_ticket_id)
    booked_at: datetime = field(default_factory=datetime.now)

    @property
    def train_name(self) -> str:
        """Name of the train this ticket was booked on."""
        return self.train.name

    @property
    def needs_assistance(self) -> bool:
        """Check if any accessibility assistance was requested."""
        return self.need_ramp or self.need_wheelchair

    def get_ticket_info(self) -> str:
        """Get the multi-line seat and accessibility summary."""
        return (
            f"Number of Seats: {self.num_seats}\n"
            f"Need Ramp: {self.need_ramp}\n"
            f"Need Wheelchair: {self.need_wheelchair}"
        )

    def to_display_dict(self) -> dict:
        """Convert ticket data to dictionary for display purposes."""
        return {
            "ticket_id": self.ticket_id,
            "train": self.train.name,
            "num_seats": self.num_seats,
            "need_ramp": self.need_ramp,
            "need_wheelchair": self.need_wheelchair,
            "booked_at": self.booked_at.strftime("%H:%M:%S"),
        }

    def __str__(self) -> str:
        return f"Ticket for {self.train.name} - {self.num_seats} seat(s)"
