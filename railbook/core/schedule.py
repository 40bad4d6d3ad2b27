"""
Schedule and duration computation.

Derives the display view of a train's schedule: departure and arrival as
``HH:MM`` strings and the time remaining until arrival. Only the time of
day is modelled, so an arrival that is earlier in the day than "now" gives
the absolute difference on the same nominal day; there is no day rollover.
"""

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional, Tuple

from ..models.train import Train
from ..utils.helpers import format_hms, format_time, seconds_since_midnight


@dataclass(frozen=True)
class ScheduleEntry:
    """Schedule view of one train at a given time of day."""

    train_name: str
    departure: str
    arrival: str
    hours: int
    minutes: int
    seconds: int
    arrived: bool

    @property
    def total_seconds(self) -> int:
        """Absolute time to arrival in seconds."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @property
    def signed_seconds(self) -> int:
        """Time to arrival in seconds, negative once the arrival time has passed."""
        return -self.total_seconds if self.arrived else self.total_seconds

    def format_time_difference(self) -> str:
        """Format the time difference for display."""
        return format_hms(self.hours, self.minutes, self.seconds)


def split_duration(delta: timedelta) -> Tuple[int, int, int]:
    """
    Decompose the absolute value of a duration into hours, minutes, seconds.

    Sub-second precision is truncated.
    """
    total = abs(int(delta.total_seconds()))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return hours, minutes, seconds


def time_until_arrival(arrival: time, now: time) -> timedelta:
    """Signed difference between two times of day on the same nominal day."""
    return timedelta(seconds=seconds_since_midnight(arrival) - seconds_since_midnight(now))


def _current_time_of_day() -> time:
    return datetime.now().time().replace(microsecond=0)


def compute_schedule_entry(train: Train, now: Optional[time] = None) -> ScheduleEntry:
    """
    Compute the schedule view of a train.

    Args:
        train: Train to describe
        now: Current time of day (defaults to the local wall clock)

    Returns:
        ScheduleEntry with formatted times and the duration to arrival
    """
    if now is None:
        now = _current_time_of_day()

    delta = time_until_arrival(train.arrival_time, now)
    hours, minutes, seconds = split_duration(delta)

    return ScheduleEntry(
        train_name=train.name,
        departure=format_time(train.departure_time),
        arrival=format_time(train.arrival_time),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        arrived=delta < timedelta(0),
    )


def format_schedule_entry(train: Train, entry: ScheduleEntry) -> str:
    """Format one schedule line for a train."""
    return (
        f"{train} (Departure Time: {entry.departure}, "
        f"Arrival Time: {entry.arrival}, "
        f"Time Difference: {entry.format_time_difference()})"
    )


def build_schedule(trains: Iterable[Train], now: Optional[time] = None) -> List[ScheduleEntry]:
    """Compute schedule entries for several trains against one clock reading."""
    if now is None:
        now = _current_time_of_day()
    return [compute_schedule_entry(train, now) for train in trains]


def format_schedule(trains: Iterable[Train], now: Optional[time] = None) -> str:
    """Format the full train schedule block."""
    if now is None:
        now = _current_time_of_day()

    lines = ["Train Schedule:"]
    for train in trains:
        lines.append(format_schedule_entry(train, compute_schedule_entry(train, now)))
    return "\n".join(lines) + "\n"
