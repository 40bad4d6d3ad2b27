"""
Reservation management for the Railbook application.

This module coordinates the train catalog and reservation ledger for a
presentation layer, emitting Qt signals after each change so views can
refresh without polling.
"""

import logging
from datetime import time
from typing import Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from ..core.catalog import TrainCatalog
from ..core.ledger import ReservationLedger
from ..core.schedule import ScheduleEntry, build_schedule, format_schedule
from ..models.booking_result import BookingFailure, BookingResult
from ..models.ticket import Ticket
from ..models.train import Train
from ..utils.helpers import get_status_summary
from .config_manager import ConfigData

logger = logging.getLogger(__name__)


class ReservationManager(QObject):
    """
    Coordinates booking and cancellation for a presentation layer.

    Delegates every operation to the ReservationLedger and reports the
    outcome through signals. The ledger remains usable on its own.
    """

    tickets_updated = Signal(list)  # List[Ticket]
    trains_updated = Signal(list)  # List[Train]
    booking_failed = Signal(str)  # Failure message
    status_changed = Signal(str)  # Status message

    def __init__(self, ledger: ReservationLedger):
        """
        Initialize reservation manager.

        Args:
            ledger: Ledger that owns the tickets
        """
        super().__init__()
        self.ledger = ledger
        logger.info("ReservationManager initialized")

    @property
    def catalog(self) -> TrainCatalog:
        """The train catalog behind the ledger."""
        return self.ledger.catalog

    def get_trains(self) -> List[Train]:
        """Get trains in catalog order."""
        return self.catalog.list_trains()

    def get_tickets(self) -> List[Ticket]:
        """Get tickets in booking order."""
        return self.ledger.list_tickets()

    def book_ticket(
        self,
        train: Optional[Train],
        num_seats: int,
        need_ramp: bool = False,
        need_wheelchair: bool = False,
    ) -> BookingResult:
        """Book seats and notify listeners of the outcome."""
        result = self.ledger.book_ticket(train, num_seats, need_ramp, need_wheelchair)

        if isinstance(result, BookingFailure):
            self.booking_failed.emit(result.message)
            self.status_changed.emit(f"Booking failed: {result.message}")
        else:
            self._emit_updates(f"Booked {result}")
        return result

    def book_ticket_by_name(
        self,
        train_name: str,
        num_seats: int,
        need_ramp: bool = False,
        need_wheelchair: bool = False,
    ) -> BookingResult:
        """Book seats on a train looked up by name."""
        return self.book_ticket(self.catalog.get_train(train_name), num_seats, need_ramp, need_wheelchair)

    def cancel_ticket(self, ticket: Optional[Ticket]) -> bool:
        """Cancel a ticket and notify listeners of the outcome."""
        if self.ledger.cancel_ticket(ticket):
            self._emit_updates(f"Cancelled {ticket}")
            return True

        self.status_changed.emit("Ticket cancellation failed")
        return False

    def cancel_ticket_by_id(self, ticket_id: str) -> bool:
        """Cancel a ticket looked up by its ID."""
        return self.cancel_ticket(self.ledger.find_ticket(ticket_id))

    def get_grouped_tickets(self) -> Dict[str, List[Ticket]]:
        """Get tickets grouped by train name."""
        return self.ledger.group_by_train()

    def get_grouped_tickets_text(self) -> str:
        """Format all tickets grouped by train."""
        lines = ["Grouped Tickets:"]
        for train_name, tickets in self.ledger.group_by_train().items():
            lines.append(f"Train Number: {train_name}")
            for ticket in tickets:
                lines.append(ticket.get_ticket_info())
                lines.append("")
        return "\n".join(lines) + "\n"

    def get_schedule(self, now: Optional[time] = None) -> List[ScheduleEntry]:
        """Get schedule entries for every train."""
        return build_schedule(self.catalog.list_trains(), now)

    def get_schedule_text(self, now: Optional[time] = None) -> str:
        """Format the train schedule block."""
        return format_schedule(self.catalog.list_trains(), now)

    def get_stats(self) -> dict:
        """Get statistics about current reservations."""
        return self.ledger.get_stats()

    def refresh(self) -> None:
        """Re-emit current state to listeners."""
        self._emit_updates("Refreshed")

    def _emit_updates(self, message: str) -> None:
        self.tickets_updated.emit(self.ledger.list_tickets())
        self.trains_updated.emit(self.catalog.list_trains())
        status = f"{message} | {get_status_summary(self.ledger.get_stats())}"
        logger.debug(status)
        self.status_changed.emit(status)


def create_reservation_system(config: Optional[ConfigData] = None) -> ReservationManager:
    """
    Compose a catalog, ledger and manager from configuration.

    Args:
        config: Application configuration (defaults to the seed catalog)

    Returns:
        ReservationManager owning a fresh ledger
    """
    if config is None:
        config = ConfigData()

    catalog = TrainCatalog.from_config(config.catalog)
    ledger = ReservationLedger(catalog)
    return ReservationManager(ledger)
