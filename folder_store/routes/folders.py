"""Folders API endpoints."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response

from ..models.folders import (
    FetchFolderRequest, FetchFolderResponse,
    FolderPaginationRequest, PaginatedFolderResponse
)
from ..pagination import create_link_header
from ..services.folders import FolderService


logger = logging.getLogger(__name__)

# Create router with prefix and tags
router = APIRouter(
    prefix="/organizations/{org_id}/folders",
    tags=["Folders"],
    responses={
        400: {"description": "Bad Request"},
        409: {"description": "Conflict - stale pagination token"},
        422: {"description": "Unprocessable Entity"},
        503: {"description": "Service Unavailable"}
    }
)


def get_folder_service(request: Request) -> FolderService:
    """Return the folder service attached to the running application."""
    return request.app.state.folder_service


FolderServiceDep = Annotated[FolderService, Depends(get_folder_service)]


@router.get(
    "",
    response_model=FetchFolderResponse,
    summary="List all folders",
    description="List every folder of an organization without pagination.",
    responses={
        200: {"description": "Folders retrieved successfully"}
    }
)
def list_all_folders(
    org_id: UUID,
    service: FolderServiceDep
) -> FetchFolderResponse:
    """List all folders for an organization.

    The nil UUID names no organization and yields an empty list.
    """
    logger.info(f"Listing all folders for org {org_id}")

    response = service.get_all_folders(FetchFolderRequest(org_id=org_id))

    logger.info(f"Retrieved {len(response.folders)} folders for org {org_id}")
    return response


@router.get(
    "/pages",
    response_model=PaginatedFolderResponse,
    summary="List folders page by page",
    description="List folders of an organization with token-based pagination.",
    responses={
        200: {"description": "Page retrieved successfully"}
    }
)
def list_folder_page(
    org_id: UUID,
    request: Request,
    response: Response,
    service: FolderServiceDep,
    per_page: Annotated[Optional[int], Query(description="Number of folders per page")] = None,
    token: Annotated[str, Query(description="Token returned by the previous page")] = ""
) -> PaginatedFolderResponse:
    """List one page of folders for an organization.

    Pass the ``token`` of each response back unchanged to fetch the next
    page; an empty token in the response means the listing is complete.

    Args:
        org_id: Organization ID from the path
        request: FastAPI request object
        response: FastAPI response object for adding headers
        service: Folder service
        per_page: Page size, defaults to the configured page size
        token: Continuation token from the previous page

    Returns:
        One page of folders with the next token
    """
    if per_page is None:
        per_page = request.app.state.settings.default_page_size

    logger.info(f"Listing folder page for org {org_id} (per_page={per_page})")

    page = service.get_paginated_folders(
        FolderPaginationRequest(org_id=org_id, per_page=per_page, token=token)
    )

    # Add Link header for pagination (RFC 8288)
    if page.token:
        base_url = str(request.url).split('?')[0]  # Remove existing query params
        link_header = create_link_header(
            base_url=base_url,
            params={"per_page": str(per_page)},
            next_token=page.token
        )
        if link_header:
            response.headers["Link"] = link_header

    logger.info(f"Retrieved {len(page.folders)} folders for org {org_id}")
    return page
