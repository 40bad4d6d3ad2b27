"""
Data models for the Railbook application.

This module contains the data structures used throughout the application:
trains, tickets and booking results.
"""

from .train import Train, DEFAULT_TOTAL_SEATS
from .ticket import Ticket
from .booking_result import BookingFailure, BookingFailureReason, BookingResult

__all__ = [
    "Train",
    "DEFAULT_TOTAL_SEATS",
    "Ticket",
    "BookingFailure",
    "BookingFailureReason",
    "BookingResult",
]
