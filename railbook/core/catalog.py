"""
Train Catalog

Registry of the trains tickets can be booked against. Train identity is
fixed when the catalog is built; only seat counters change afterwards.
"""

import logging
from typing import Iterator, List, Optional

from ..models.train import Train, DEFAULT_TOTAL_SEATS
from ..utils.helpers import parse_time

logger = logging.getLogger(__name__)

# Seed catalog: (name, source, destination, departure, arrival)
DEFAULT_TRAIN_SEED = [
    ("Train 1", "Boston", "Portland", "00:55", "23:00"),
    ("Train 2", "Chicago", "Madison", "00:56", "21:00"),
    ("Train 3", "San Francisco", "Los Angeles", "19:00", "18:50"),
]


class TrainCatalog:
    """Ordered registry of trains keyed by unique name."""

    def __init__(self, trains: Optional[List[Train]] = None):
        """
        Initialize the catalog.

        Args:
            trains: Trains in display order

        Raises:
            ValueError: If two trains share a name
        """
        self._trains: List[Train] = []
        self._by_name = {}

        for train in trains or []:
            if train.name in self._by_name:
                raise ValueError(f"Duplicate train name in catalog: {train.name}")
            self._trains.append(train)
            self._by_name[train.name] = train

        logger.debug(f"TrainCatalog initialized with {len(self._trains)} trains")

    @classmethod
    def from_config(cls, catalog_config) -> "TrainCatalog":
        """
        Build a catalog from a CatalogConfig.

        Args:
            catalog_config: Catalog section of the application configuration

        Returns:
            TrainCatalog with one train per configured entry
        """
        trains = [
            Train(
                name=entry.name,
                source=entry.source,
                destination=entry.destination,
                departure_time=parse_time(entry.departure_time),
                arrival_time=parse_time(entry.arrival_time),
                total_seats=entry.total_seats,
            )
            for entry in catalog_config.trains
        ]
        return cls(trains)

    def list_trains(self) -> List[Train]:
        """Get all trains in catalog order."""
        return list(self._trains)

    def get_train(self, name: str) -> Optional[Train]:
        """Find a train by name."""
        return self._by_name.get(name)

    def book_seats(self, train: Train, num_seats: int) -> None:
        """
        Record booked seats on a train.

        No capacity check is made here; the ledger checks availability
        before calling.
        """
        train.book_seats(num_seats)
        logger.debug(f"{train.name}: booked {num_seats}, now {train.booked_seats}/{train.total_seats}")

    def cancel_seats(self, train: Train, num_seats: int) -> None:
        """Release booked seats; out-of-range counts are a no-op."""
        before = train.booked_seats
        train.cancel_seats(num_seats)
        if train.booked_seats == before:
            logger.debug(f"{train.name}: ignored cancel of {num_seats} seats ({before} booked)")
        else:
            logger.debug(f"{train.name}: cancelled {num_seats}, now {train.booked_seats}/{train.total_seats}")

    def available_seats(self, train: Train) -> int:
        """Seats still bookable on a train."""
        return train.available_seats

    def __contains__(self, train) -> bool:
        return isinstance(train, Train) and self._by_name.get(train.name) is train

    def __iter__(self) -> Iterator[Train]:
        return iter(list(self._trains))

    def __len__(self) -> int:
        return len(self._trains)


def create_default_catalog(total_seats: int = DEFAULT_TOTAL_SEATS) -> TrainCatalog:
    """Create the three-train seed catalog."""
    return TrainCatalog(
        [
            Train(
                name=name,
                source=source,
                destination=destination,
                departure_time=parse_time(departure),
                arrival_time=parse_time(arrival),
                total_seats=total_seats,
            )
            for name, source, destination, departure, arrival in DEFAULT_TRAIN_SEED
        ]
    )
