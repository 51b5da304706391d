"""Database layer for the SQL record source."""

from .connection import DatabaseManager, db_manager, create_schema, seed_folders
from .models import Base, FolderRow

__all__ = [
    "DatabaseManager",
    "db_manager",
    "create_schema",
    "seed_folders",
    "Base",
    "FolderRow"
]
