"""Record source backed by a SQL database."""

import logging
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..db.models import FolderRow
from ..errors.pagination import RecordSourceError
from ..models.folders import Folder
from .base import RecordSource


logger = logging.getLogger(__name__)


class SqlRecordSource(RecordSource):
    """Reads folders from the ``folders`` table ordered by ``(created_at, id)``."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def fetch_by_org(self, org_id: UUID) -> List[Folder]:
        """Return the folders of ``org_id``.

        Raises:
            RecordSourceError: If the database query fails
        """
        query = (
            select(FolderRow.id, FolderRow.name, FolderRow.org_id, FolderRow.deleted)
            .where(FolderRow.org_id == org_id)
            .order_by(FolderRow.created_at, FolderRow.id)
        )

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching folders for org {org_id}: {e}")
            raise RecordSourceError(f"Database error: {type(e).__name__}") from e

        logger.debug(f"Fetched {len(rows)} folders for org {org_id}")
        return [Folder.model_validate(dict(row)) for row in rows]
