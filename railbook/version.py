"""
Version information for the Railbook application.

Centralized version management for the reservation core and the
configuration and logging layers built around it.
"""

# Core application information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "Railbook"
__description__ = "Seat reservation ledger for a fixed catalog of scheduled trains"

# Development information
__python_version_required__ = "3.9+"
__license__ = "GPL v3"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"
