"""
Helper utility functions for the Railbook application.

This module contains small utility functions for parsing and formatting
times of day and summarising ticket data.
"""

from datetime import datetime, time
from typing import Dict, List, Union

TIME_FORMAT = "%H:%M"


def parse_time(value: str) -> time:
    """
    Parse an ``HH:MM`` string into a time of day.

    Args:
        value: Time string such as "00:55" or "7:05"

    Returns:
        time: Parsed time of day

    Raises:
        ValueError: If the string is not a valid HH:MM time
    """
    return datetime.strptime(value.strip(), TIME_FORMAT).time()


def format_time(value: Union[datetime, time]) -> str:
    """
    Format a datetime or time of day to an ``HH:MM`` string.

    Args:
        value: Datetime or time object to format

    Returns:
        str: Zero-padded time string
    """
    return value.strftime(TIME_FORMAT)


def seconds_since_midnight(value: time) -> int:
    """Whole seconds elapsed between midnight and a time of day."""
    return value.hour * 3600 + value.minute * 60 + value.second


def format_hms(hours: int, minutes: int, seconds: int) -> str:
    """
    Format an hours/minutes/seconds triple for display.

    Returns:
        str: e.g. "2 hours 5 minutes 0 seconds"
    """
    return f"{hours} hours {minutes} minutes {seconds} seconds"


def validate_seat_count(num_seats) -> bool:
    """
    Check that a requested seat count is a positive integer.

    Booleans are rejected even though they subclass int.
    """
    return isinstance(num_seats, int) and not isinstance(num_seats, bool) and num_seats > 0


def calculate_ledger_stats(trains: List, tickets: List) -> Dict[str, int]:
    """
    Calculate statistics about current reservations.

    Args:
        trains: Trains in the catalog
        tickets: Tickets currently held in the ledger

    Returns:
        Dict with totals for tickets, seats and accessibility requests
    """
    total_capacity = sum(train.total_seats for train in trains)
    booked = sum(train.booked_seats for train in trains)

    return {
        "trains": len(trains),
        "tickets": len(tickets),
        "total_seats": total_capacity,
        "booked_seats": booked,
        "available_seats": total_capacity - booked,
        "ramp_requests": sum(1 for ticket in tickets if ticket.need_ramp),
        "wheelchair_requests": sum(1 for ticket in tickets if ticket.need_wheelchair),
        "full_trains": sum(1 for train in trains if train.is_full),
    }


def get_status_summary(stats: Dict[str, int]) -> str:
    """Get a one-line summary of ledger statistics."""
    if stats["tickets"] == 0:
        return "No tickets booked"

    summary = f"{stats['tickets']} tickets, {stats['booked_seats']} seats booked"
    if stats["full_trains"] > 0:
        summary += f", {stats['full_trains']} trains full"
    return summary
