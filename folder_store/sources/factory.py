"""Build the configured record source."""

import logging

from ..config import Settings
from ..db.connection import create_schema, db_manager
from .base import RecordSource
from .memory import InMemoryRecordSource
from .sample_data import generate_sample_folders, load_sample_folders
from .sql import SqlRecordSource


logger = logging.getLogger(__name__)


def build_record_source(settings: Settings) -> RecordSource:
    """Create the record source selected by ``settings.record_source``.

    The memory source serves the sample file when ``sample_data_path`` is
    set, otherwise folders generated from ``sample_seed``.
    """
    if settings.record_source == "sql":
        engine = db_manager.initialize(
            settings.database_url,
            pool_size=settings.db_pool_size,
            echo=settings.db_echo
        )
        create_schema(engine)
        logger.info("Using SQL record source")
        return SqlRecordSource(engine)

    if settings.sample_data_path:
        folders = load_sample_folders(settings.sample_data_path)
    else:
        folders = generate_sample_folders(settings.sample_seed)
    logger.info(f"Using in-memory record source with {len(folders)} folders")
    return InMemoryRecordSource(folders)
