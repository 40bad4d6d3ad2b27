"""
Global pytest configuration and fixtures.
"""

import os

# Qt needs a platform plugin even for QObject-only tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from datetime import time

import pytest

from railbook.core.catalog import create_default_catalog
from railbook.core.ledger import ReservationLedger
from railbook.managers.config_manager import ConfigData, CatalogConfig, TrainConfig, LoggingConfig
from railbook.models.train import Train


@pytest.fixture
def catalog():
    """Provide the three-train seed catalog."""
    return create_default_catalog()


@pytest.fixture
def ledger(catalog):
    """Provide an empty ledger over the seed catalog."""
    return ReservationLedger(catalog)


@pytest.fixture
def train_one(catalog):
    """Provide 'Train 1' from the seed catalog."""
    return catalog.get_train("Train 1")


@pytest.fixture
def small_train():
    """Provide a standalone train with a small capacity."""
    return Train(
        name="Test Train",
        source="Seattle",
        destination="Portland",
        departure_time=time(7, 0),
        arrival_time=time(12, 15),
        total_seats=5,
    )


@pytest.fixture
def test_config():
    """Provide a two-train test configuration."""
    return ConfigData(
        catalog=CatalogConfig(
            trains=[
                TrainConfig(
                    name="Express A",
                    source="New York",
                    destination="Philadelphia",
                    departure_time="07:00",
                    arrival_time="08:30",
                    total_seats=10,
                ),
                TrainConfig(
                    name="Express B",
                    source="Washington",
                    destination="New York",
                    departure_time="09:15",
                    arrival_time="12:15",
                ),
            ]
        ),
        logging=LoggingConfig(level="debug", log_to_file=False),
    )
