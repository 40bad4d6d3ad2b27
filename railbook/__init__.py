"""
Railbook rail ticket reservation ledger

Books and cancels tickets against a fixed catalog of trains, keeping each
train's seat counter in step with the tickets issued for it.

Features:
- Fixed train catalog with 100-seat default capacity
- Typed booking failures instead of exceptions
- Tickets grouped by train
- Time-of-day schedule view with time to arrival
"""

from .version import __version__

__author__ = "Railbook Development Team"
__description__ = "Rail ticket reservation ledger"
