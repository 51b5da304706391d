"""API routes for Folder Store."""

from .folders import router as folders_router, get_folder_service

__all__ = ["folders_router", "get_folder_service"]
