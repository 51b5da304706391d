"""In-memory record source."""

import logging
from typing import Iterable, List
from uuid import UUID

from ..models.folders import Folder
from .base import RecordSource


logger = logging.getLogger(__name__)


class InMemoryRecordSource(RecordSource):
    """Serves folders from a fixed sequence, preserving insertion order."""

    def __init__(self, folders: Iterable[Folder]):
        self._folders = tuple(folders)
        logger.debug(f"In-memory record source holds {len(self._folders)} folders")

    def __len__(self) -> int:
        return len(self._folders)

    def fetch_by_org(self, org_id: UUID) -> List[Folder]:
        return [folder for folder in self._folders if folder.org_id == org_id]
