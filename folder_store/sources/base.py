"""Record source interface."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ..models.folders import Folder


class RecordSource(ABC):
    """Supplies the folders of an organization in a stable order.

    Implementations must return the same order on repeated calls while the
    underlying data is unchanged; pagination depends on it.
    """

    @abstractmethod
    def fetch_by_org(self, org_id: UUID) -> List[Folder]:
        """Return every folder owned by ``org_id``, in source order."""
