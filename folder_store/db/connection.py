"""Database connection utilities for Folder Store."""

import logging
from typing import Iterable, Optional

from sqlalchemy import create_engine, insert, text
from sqlalchemy.engine import Engine

from ..models.folders import Folder
from .models import Base, FolderRow


logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the SQLAlchemy engine and its connection pool."""

    def __init__(self):
        self.engine: Optional[Engine] = None

    def initialize(self, database_url: str, pool_size: int = 5, echo: bool = False) -> Engine:
        """Create the engine if it does not exist yet."""
        if self.engine is None:
            kwargs = {"echo": echo, "pool_pre_ping": True}
            if not database_url.startswith("sqlite"):
                kwargs["pool_size"] = pool_size
            self.engine = create_engine(database_url, **kwargs)
            logger.info(f"Database engine created for {self.engine.url.render_as_string(hide_password=True)}")
        return self.engine

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def ping(self) -> None:
        """Run a trivial query; raises if the database is unreachable."""
        if self.engine is None:
            raise RuntimeError("Database engine is not initialized")
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))


# Global database manager instance
db_manager = DatabaseManager()


def create_schema(engine: Engine) -> None:
    """Create the folders table if it is missing."""
    Base.metadata.create_all(engine)


def seed_folders(engine: Engine, folders: Iterable[Folder]) -> int:
    """Insert folders one statement per row, preserving their order.

    Returns:
        Number of rows inserted
    """
    count = 0
    with engine.begin() as conn:
        for folder in folders:
            conn.execute(insert(FolderRow).values(**folder.model_dump()))
            count += 1
    logger.info(f"Seeded {count} folders")
    return count
