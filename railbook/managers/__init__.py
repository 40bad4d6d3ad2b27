"""
Business logic managers for the Railbook application.

This module contains the configuration manager and the reservation
manager that coordinates the ledger for a presentation layer.
"""

from .config_manager import (
    ConfigManager,
    ConfigData,
    CatalogConfig,
    TrainConfig,
    LoggingConfig,
    ConfigurationError,
)
from .reservation_manager import ReservationManager, create_reservation_system

__all__ = [
    "ConfigManager",
    "ConfigData",
    "CatalogConfig",
    "TrainConfig",
    "LoggingConfig",
    "ConfigurationError",
    "ReservationManager",
    "create_reservation_system",
]
