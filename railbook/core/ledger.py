"""
Reservation Ledger

Owns the issued tickets and keeps every train's booked-seat counter equal
to the seats held by that train's tickets. All mutations go through
``book_ticket`` and ``cancel_ticket``.
"""

import logging
import threading
from typing import Dict, List, Optional

from ..models.train import Train
from ..models.ticket import Ticket
from ..models.booking_result import BookingFailure, BookingFailureReason, BookingResult
from ..utils.helpers import validate_seat_count, calculate_ledger_stats
from .catalog import TrainCatalog

logger = logging.getLogger(__name__)


class ReservationLedger:
    """
    Booking and cancellation against a train catalog.

    Check-then-act sequences run under a single ledger lock so concurrent
    callers can never oversell a train. Failures are returned as values.
    """

    def __init__(self, catalog: TrainCatalog):
        """
        Initialize the ledger.

        Args:
            catalog: Trains that tickets may be booked against
        """
        self._catalog = catalog
        self._tickets: List[Ticket] = []
        self._lock = threading.Lock()

        logger.info(f"ReservationLedger initialized for {len(catalog)} trains")

    @property
    def catalog(self) -> TrainCatalog:
        """The train catalog this ledger books against."""
        return self._catalog

    def book_ticket(
        self,
        train: Optional[Train],
        num_seats: int,
        need_ramp: bool = False,
        need_wheelchair: bool = False,
    ) -> BookingResult:
        """
        Book seats on a train.

        Args:
            train: Train to book on
            num_seats: Number of seats to reserve
            need_ramp: Whether ramp access is required
            need_wheelchair: Whether wheelchair space is required

        Returns:
            The new Ticket, or a BookingFailure describing the rejection
        """
        if train is None:
            return self._reject(BookingFailureReason.INVALID_TRAIN, "No train selected")

        if not isinstance(train, Train):
            return self._reject(BookingFailureReason.INVALID_TRAIN, f"Not a train: {train!r}")

        if train not in self._catalog:
            return self._reject(
                BookingFailureReason.UNKNOWN_TRAIN, f"{train.name} is not in the train catalog"
            )

        if not validate_seat_count(num_seats):
            return self._reject(
                BookingFailureReason.INVALID_SEAT_COUNT,
                f"Invalid number of seats: {num_seats!r}",
            )

        with self._lock:
            available = self._catalog.available_seats(train)
            if available < num_seats:
                return self._reject(
                    BookingFailureReason.INSUFFICIENT_SEATS,
                    f"Only {available} seats available on {train.name}, requested {num_seats}",
                )

            ticket = Ticket(
                train=train,
                num_seats=num_seats,
                need_ramp=bool(need_ramp),
                need_wheelchair=bool(need_wheelchair),
            )
            self._catalog.book_seats(train, num_seats)
            self._tickets.append(ticket)

        logger.info(f"Booked {ticket} [{ticket.ticket_id}]")
        return ticket

    def cancel_ticket(self, ticket: Optional[Ticket]) -> bool:
        """
        Cancel a ticket and release its seats.

        Args:
            ticket: Ticket previously returned by ``book_ticket``

        Returns:
            True if the ticket was cancelled, False otherwise
        """
        if (
            not isinstance(ticket, Ticket)
            or ticket.train is None
            or not validate_seat_count(ticket.num_seats)
        ):
            logger.warning(f"Rejected cancellation of invalid ticket: {ticket!r}")
            return False

        train = ticket.train
        with self._lock:
            if ticket not in self._tickets:
                logger.warning(f"Ticket {ticket.ticket_id} is not in the ledger")
                return False

            if ticket.num_seats > train.booked_seats:
                logger.error(
                    f"Ticket {ticket.ticket_id} holds {ticket.num_seats} seats but "
                    f"{train.name} has only {train.booked_seats} booked"
                )
                return False

            self._catalog.cancel_seats(train, ticket.num_seats)
            self._tickets.remove(ticket)

        logger.info(f"Cancelled {ticket} [{ticket.ticket_id}]")
        return True

    def list_tickets(self) -> List[Ticket]:
        """Get all tickets in booking order."""
        with self._lock:
            return list(self._tickets)

    def group_by_train(self) -> Dict[str, List[Ticket]]:
        """
        Group tickets by train name.

        Keys appear in the order their first ticket was booked; each group
        keeps booking order.
        """
        grouped: Dict[str, List[Ticket]] = {}
        for ticket in self.list_tickets():
            grouped.setdefault(ticket.train.name, []).append(ticket)
        return grouped

    def find_ticket(self, ticket_id: str) -> Optional[Ticket]:
        """Find a ticket by its ID."""
        for ticket in self.list_tickets():
            if ticket.ticket_id == ticket_id:
                return ticket
        return None

    def tickets_for_train(self, train: Train) -> List[Ticket]:
        """Get the tickets booked on one train, in booking order."""
        return [ticket for ticket in self.list_tickets() if ticket.train is train]

    def booked_seats_for(self, train: Train) -> int:
        """Total seats held by the ledger's tickets for one train."""
        return sum(ticket.num_seats for ticket in self.tickets_for_train(train))

    def check_invariants(self) -> bool:
        """
        Verify capacity bounds and seat conservation for every train.

        Returns:
            True if every train's counter matches its tickets
        """
        with self._lock:
            tickets = list(self._tickets)
            for train in self._catalog:
                held = sum(ticket.num_seats for ticket in tickets if ticket.train is train)
                if not 0 <= train.booked_seats <= train.total_seats:
                    logger.error(f"{train.name} booked seats out of range: {train.booked_seats}")
                    return False
                if held != train.booked_seats:
                    logger.error(
                        f"{train.name} counter {train.booked_seats} does not match tickets ({held})"
                    )
                    return False
        return True

    def get_stats(self) -> dict:
        """Get statistics about current reservations."""
        with self._lock:
            return calculate_ledger_stats(self._catalog.list_trains(), list(self._tickets))

    def _reject(self, reason: BookingFailureReason, message: str) -> BookingFailure:
        logger.warning(f"Booking rejected ({reason.value}): {message}")
        return BookingFailure(reason=reason, message=message)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tickets)
