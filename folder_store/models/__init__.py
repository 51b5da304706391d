"""Data models for Folder Store API."""

from .folders import (
    NIL_ORG_ID,
    Folder,
    FetchFolderRequest,
    FetchFolderResponse,
    FolderPaginationRequest,
    PaginatedFolderResponse,
    is_nil_org
)

__all__ = [
    "NIL_ORG_ID",
    "Folder",
    "FetchFolderRequest",
    "FetchFolderResponse",
    "FolderPaginationRequest",
    "PaginatedFolderResponse",
    "is_nil_org"
]
