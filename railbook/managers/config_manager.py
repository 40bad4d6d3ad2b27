"""
Configuration management for the Railbook application.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.catalog import DEFAULT_TRAIN_SEED
from ..models.train import DEFAULT_TOTAL_SEATS
from ..utils.helpers import parse_time
from ..version import __version__

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TrainConfig(BaseModel):
    """Configuration for one catalog train."""

    name: str = Field(..., min_length=1, description="Unique train name")
    source: str = Field(..., description="Origin station")
    destination: str = Field(..., description="Destination station")
    departure_time: str = Field(..., description="Scheduled departure in HH:MM format")
    arrival_time: str = Field(..., description="Scheduled arrival in HH:MM format")
    total_seats: int = Field(default=DEFAULT_TOTAL_SEATS, ge=1, description="Seat capacity")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate train name is not blank."""
        name = v.strip()
        if not name:
            raise ValueError("Train name cannot be blank")
        return name

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def validate_time_of_day(cls, v: str) -> str:
        """Validate HH:MM time strings."""
        try:
            parse_time(v)
        except ValueError:
            raise ValueError(f"Invalid time of day: {v!r} (expected HH:MM)")
        return v.strip()


def _default_trains() -> List[TrainConfig]:
    return [
        TrainConfig(
            name=name,
            source=source,
            destination=destination,
            departure_time=departure,
            arrival_time=arrival,
        )
        for name, source, destination, departure, arrival in DEFAULT_TRAIN_SEED
    ]


class CatalogConfig(BaseModel):
    """Configuration for the train catalog."""

    trains: List[TrainConfig] = Field(default_factory=_default_trains)

    @field_validator("trains")
    @classmethod
    def validate_unique_names(cls, v: List[TrainConfig]) -> List[TrainConfig]:
        """Train names identify trains, so they must be unique."""
        names = [train.name for train in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate train names: {', '.join(duplicates)}")
        return v


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = "WARNING"
    log_to_file: bool = True

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return level


class ConfigData(BaseModel):
    """Main configuration data model."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                per-user configuration directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/Railbook/config.json
        On Linux, uses XDG_CONFIG_HOME/Railbook/config.json or ~/.config/Railbook/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":  # Windows
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "Railbook" / "config.json"
        else:  # Linux/Unix
            xdg_config = os.environ.get("XDG_CONFIG_HOME")
            if xdg_config:
                return Path(xdg_config) / "Railbook" / "config.json"
            return Path.home() / ".config" / "Railbook" / "config.json"

        # Fallback to current directory for development
        return Path("config.json")

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except Exception as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            self.config = config
            return True
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        self.save_config(ConfigData())

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        if not self.config:
            return {"error": "Configuration not loaded"}

        trains = self.config.catalog.trains
        return {
            "app_version": __version__,
            "train_count": len(trains),
            "trains": [f"{t.name}: {t.source} → {t.destination}" for t in trains],
            "total_capacity": sum(t.total_seats for t in trains),
            "log_level": self.config.logging.level,
            "log_to_file": "Enabled" if self.config.logging.log_to_file else "Disabled",
        }
