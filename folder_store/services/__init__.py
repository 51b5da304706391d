"""Folder services."""

from .folders import (
    FolderService,
    fetch_all_folders_by_org_id,
    fetch_paginated_folders_by_org_id
)

__all__ = [
    "FolderService",
    "fetch_all_folders_by_org_id",
    "fetch_paginated_folders_by_org_id"
]
