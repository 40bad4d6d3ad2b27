"""
Core Package

Reservation core: the train catalog, the reservation ledger and the
schedule computations.
"""

from .catalog import TrainCatalog, create_default_catalog, DEFAULT_TRAIN_SEED
from .ledger import ReservationLedger
from .schedule import (
    ScheduleEntry,
    split_duration,
    time_until_arrival,
    compute_schedule_entry,
    format_schedule_entry,
    build_schedule,
    format_schedule,
)

__all__ = [
    'TrainCatalog',
    'create_default_catalog',
    'DEFAULT_TRAIN_SEED',
    'ReservationLedger',
    'ScheduleEntry',
    'split_duration',
    'time_until_arrival',
    'compute_schedule_entry',
    'format_schedule_entry',
    'build_schedule',
    'format_schedule',
]
