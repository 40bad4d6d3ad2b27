"""
Unit tests for schedule and duration computation.
"""

import pytest
from datetime import time, timedelta
from unittest.mock import patch

from railbook.core import schedule
from railbook.core.schedule import (
    ScheduleEntry,
    build_schedule,
    compute_schedule_entry,
    format_schedule,
    format_schedule_entry,
    split_duration,
    time_until_arrival,
)


class TestSplitDuration:
    """Test hours/minutes/seconds decomposition."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, (0, 0, 0)),
            (59, (0, 0, 59)),
            (3600, (1, 0, 0)),
            (3661, (1, 1, 1)),
            (86399, (23, 59, 59)),
        ],
    )
    def test_split(self, seconds, expected):
        """Test decomposition of known durations."""
        assert split_duration(timedelta(seconds=seconds)) == expected

    def test_negative_durations_use_absolute_value(self):
        """Test that sign is dropped."""
        assert split_duration(timedelta(minutes=-10)) == (0, 10, 0)

    def test_sub_second_precision_truncated(self):
        """Test that fractional seconds are ignored."""
        assert split_duration(timedelta(seconds=61, milliseconds=900)) == (0, 1, 1)

    def test_decomposition_bounds(self):
        """Test minutes and seconds stay below 60 and the total is preserved."""
        for total in range(0, 86400, 997):
            hours, minutes, seconds = split_duration(timedelta(seconds=-total))
            assert 0 <= minutes < 60
            assert 0 <= seconds < 60
            assert hours * 3600 + minutes * 60 + seconds == total


class TestTimeUntilArrival:
    """Test time-of-day arithmetic."""

    def test_arrival_later_today(self):
        """Test positive difference."""
        assert time_until_arrival(time(23, 0), time(21, 30)) == timedelta(hours=1, minutes=30)

    def test_arrival_already_passed(self):
        """Test an earlier arrival gives a negative difference, not tomorrow."""
        assert time_until_arrival(time(18, 50), time(19, 0)) == timedelta(minutes=-10)


class TestComputeScheduleEntry:
    """Test schedule entries for the seed trains."""

    def test_train_one(self, catalog):
        """Test formatted times and remaining duration."""
        entry = compute_schedule_entry(catalog.get_train("Train 1"), time(10, 30, 15))

        assert entry.train_name == "Train 1"
        assert entry.departure == "00:55"
        assert entry.arrival == "23:00"
        assert (entry.hours, entry.minutes, entry.seconds) == (12, 29, 45)
        assert entry.arrived is False
        assert entry.signed_seconds == entry.total_seconds

    def test_train_three_arrival_before_departure(self, catalog):
        """Test a train whose arrival time of day precedes its departure."""
        entry = compute_schedule_entry(catalog.get_train("Train 3"), time(19, 0))

        assert entry.departure == "19:00"
        assert entry.arrival == "18:50"
        assert (entry.hours, entry.minutes, entry.seconds) == (0, 10, 0)
        assert entry.arrived is True
        assert entry.signed_seconds == -600

    def test_now_equals_arrival(self, catalog):
        """Test zero duration at the arrival time."""
        entry = compute_schedule_entry(catalog.get_train("Train 2"), time(21, 0))

        assert entry.total_seconds == 0
        assert entry.arrived is False

    def test_defaults_to_wall_clock(self, catalog):
        """Test that the current time of day is used when none is given."""
        with patch.object(schedule, "_current_time_of_day", return_value=time(20, 0)):
            entry = compute_schedule_entry(catalog.get_train("Train 2"))

        assert (entry.hours, entry.minutes, entry.seconds) == (1, 0, 0)

    def test_entry_immutable(self, catalog):
        """Test that ScheduleEntry is frozen."""
        entry = compute_schedule_entry(catalog.get_train("Train 1"), time(0, 0))

        with pytest.raises(AttributeError):
            entry.hours = 1


class TestScheduleFormatting:
    """Test schedule text output."""

    def test_format_time_difference(self):
        """Test the duration phrase."""
        entry = ScheduleEntry("T", "01:00", "02:00", 2, 5, 0, False)

        assert entry.format_time_difference() == "2 hours 5 minutes 0 seconds"

    def test_format_schedule_entry(self, catalog):
        """Test a full schedule line."""
        train = catalog.get_train("Train 2")
        entry = compute_schedule_entry(train, time(20, 0))

        assert format_schedule_entry(train, entry) == (
            "Train 2 - From Chicago to Madison (100 seats available) "
            "(Departure Time: 00:56, Arrival Time: 21:00, "
            "Time Difference: 1 hours 0 minutes 0 seconds)"
        )

    def test_format_schedule(self, catalog):
        """Test the schedule block has a header and one line per train."""
        text = format_schedule(catalog.list_trains(), time(12, 0))
        lines = text.splitlines()

        assert lines[0] == "Train Schedule:"
        assert len(lines) == 4
        assert lines[3].startswith("Train 3 - From San Francisco to Los Angeles")
        assert text.endswith("\n")

    def test_build_schedule(self, catalog):
        """Test entries for every train against one clock reading."""
        entries = build_schedule(catalog.list_trains(), time(12, 0))

        assert [e.train_name for e in entries] == ["Train 1", "Train 2", "Train 3"]
        assert [e.total_seconds for e in entries] == [11 * 3600, 9 * 3600, 6 * 3600 + 50 * 60]
