"""
Main entry point for the Railbook reservation ledger.

This module sets up logging, loads the configuration, composes the train
catalog and reservation ledger, and prints the current train schedule.
"""

import logging
import os
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from railbook.managers.config_manager import (
    ConfigData,
    ConfigManager,
    ConfigurationError,
    LoggingConfig,
)
from railbook.managers.reservation_manager import ReservationManager, create_reservation_system
from railbook.version import __app_name__, __version__, get_version_string


def get_log_directory() -> Path:
    """Get the per-platform log directory."""
    if sys.platform == "darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "Railbook"
    elif sys.platform == "win32":  # Windows
        return Path(os.environ.get("APPDATA", Path.home())) / "Railbook" / "logs"
    else:  # Linux and others
        return Path.home() / ".local" / "share" / "railbook" / "logs"


def setup_logging(logging_config: LoggingConfig) -> None:
    """Setup application logging with file and console output."""
    handlers = [logging.StreamHandler()]

    if logging_config.log_to_file:
        log_dir = get_log_directory()
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_dir / "railbook.log")))

    level = getattr(logging, logging_config.level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Set specific log levels for different modules
    logging.getLogger("railbook.core").setLevel(level)
    logging.getLogger("railbook.managers").setLevel(level)


def load_configuration() -> ConfigData:
    """Load configuration, falling back to defaults if the file is invalid."""
    config_manager = ConfigManager()
    try:
        return config_manager.load_config()
    except ConfigurationError as e:
        print(f"Configuration error, using defaults: {e}")
        return ConfigData()


def connect_signals(manager: ReservationManager) -> None:
    """
    Connect reservation manager signals to the log.

    Args:
        manager: Reservation manager instance
    """
    manager.status_changed.connect(lambda msg: logging.info(msg))
    manager.booking_failed.connect(lambda msg: logging.warning(f"Booking failed: {msg}"))


def main() -> int:
    """Main application entry point."""
    config = load_configuration()
    setup_logging(config.logging)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    app.setApplicationName(__app_name__)
    app.setApplicationVersion(__version__)

    logging.info(f"Starting {get_version_string()}")

    manager = create_reservation_system(config)
    connect_signals(manager)

    print(get_version_string())
    print(manager.get_schedule_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
