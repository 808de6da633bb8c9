"""Core app configuration, database, security and errors."""

from book_inventory.core.config import Settings, get_settings
from book_inventory.core.database import Database, get_db

__all__ = ["Database", "Settings", "get_db", "get_settings"]
