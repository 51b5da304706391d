"""Record sources that supply folders by organization."""

from .base import RecordSource
from .memory import InMemoryRecordSource
from .sql import SqlRecordSource
from .sample_data import (
    DEFAULT_ORG_ID,
    SINGLE_FOLDER_ORG_ID,
    generate_sample_folders,
    load_sample_folders,
    dump_sample_folders
)

__all__ = [
    "RecordSource",
    "InMemoryRecordSource",
    "SqlRecordSource",
    "DEFAULT_ORG_ID",
    "SINGLE_FOLDER_ORG_ID",
    "generate_sample_folders",
    "load_sample_folders",
    "dump_sample_folders"
]
