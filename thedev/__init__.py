"""theDev Backend - course listings, bookings and playtest feedback.

This package exposes a small REST API whose only storage is a shared
Google Sheets spreadsheet.
"""

__version__ = "0.1.0"

from .api.main import create_app
from .config import AppConfig, load_config
from .sheets.client import GoogleSheetsClient


__all__ = [
    "AppConfig",
    "GoogleSheetsClient",
    "create_app",
    "load_config",
]
