"""Folder read operations: fetch-all and fetch-paginated."""

import logging
from operator import attrgetter
from typing import List, Optional
from uuid import UUID

from ..errors.pagination import InvalidPageSizeError
from ..models.folders import (
    Folder,
    FetchFolderRequest,
    FetchFolderResponse,
    FolderPaginationRequest,
    PaginatedFolderResponse,
    is_nil_org
)
from ..pagination import Base64TokenCodec, CursorPaginator, Page, TokenCodec
from ..sources.base import RecordSource


logger = logging.getLogger(__name__)


def fetch_all_folders_by_org_id(source: RecordSource, org_id: UUID) -> List[Folder]:
    """Fetch all folders for an organization, in source order."""
    return list(source.fetch_by_org(org_id))


def fetch_paginated_folders_by_org_id(
    paginator: CursorPaginator,
    org_id: UUID,
    per_page: int,
    token: str = ""
) -> Page:
    """Fetch one page of an organization's folders."""
    return paginator.get_page(org_id, per_page, token)


class FolderService:
    """Validates folder requests and shapes results into responses.

    Args:
        source: Supplies folders by organization
        codec: Token codec, base64 when omitted
        max_page_size: Upper bound on ``per_page``, unbounded when None
    """

    def __init__(
        self,
        source: RecordSource,
        codec: Optional[TokenCodec] = None,
        max_page_size: Optional[int] = None
    ):
        self.source = source
        self.codec = codec or Base64TokenCodec()
        self.max_page_size = max_page_size
        self.paginator = CursorPaginator(
            fetch=source.fetch_by_org,
            codec=self.codec,
            key=attrgetter("id"),
            parse_key=UUID
        )

    def get_all_folders(self, request: FetchFolderRequest) -> FetchFolderResponse:
        """Return every folder of the requested organization."""
        if is_nil_org(request.org_id):
            return FetchFolderResponse(folders=[])

        folders = fetch_all_folders_by_org_id(self.source, request.org_id)
        logger.debug(f"Fetched {len(folders)} folders for org {request.org_id}")
        return FetchFolderResponse(folders=folders)

    def get_paginated_folders(self, request: FolderPaginationRequest) -> PaginatedFolderResponse:
        """Return one page of folders and the token for the next page.

        Raises:
            InvalidPageSizeError: If ``per_page`` is not positive or above the limit
            InvalidTokenError: If the token cannot be decoded
            StaleTokenError: If the token points outside the current result set
        """
        self._validate_page_size(request.per_page)

        if is_nil_org(request.org_id):
            return PaginatedFolderResponse()

        page = fetch_paginated_folders_by_org_id(
            self.paginator, request.org_id, request.per_page, request.token
        )
        return PaginatedFolderResponse(
            folders=page.items,
            token=page.next_token,
            has_more=page.has_more
        )

    def _validate_page_size(self, per_page: int) -> None:
        if per_page < 1:
            raise InvalidPageSizeError(per_page)
        if self.max_page_size is not None and per_page > self.max_page_size:
            raise InvalidPageSizeError(per_page, self.max_page_size)
