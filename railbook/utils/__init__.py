"""
Utility functions for the Railbook application.
"""

from .helpers import (
    parse_time,
    format_time,
    format_hms,
    seconds_since_midnight,
    validate_seat_count,
    calculate_ledger_stats,
    get_status_summary,
)

__all__ = [
    "parse_time",
    "format_time",
    "format_hms",
    "seconds_since_midnight",
    "validate_seat_count",
    "calculate_ledger_stats",
    "get_status_summary",
]
