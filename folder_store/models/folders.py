"""Pydantic models for folders and their request/response envelopes."""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict


NIL_ORG_ID = UUID(int=0)


class Folder(BaseModel):
    """A folder record owned by an organization."""

    id: UUID = Field(description="Folder UUID, unique and stable")
    name: str = Field(description="Folder display name")
    org_id: UUID = Field(description="Organization that owns this folder")
    deleted: bool = Field(default=False, description="Whether the folder is flagged as deleted")

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "00001d65-d336-485a-8331-7b53f37e8f51",
                "name": "sacred-moonstar",
                "org_id": "c1556e17-b7c0-45a3-a6ae-9546248fb17a",
                "deleted": False
            }
        }
    )


class FetchFolderRequest(BaseModel):
    """Request for all folders of an organization."""

    org_id: Optional[UUID] = Field(
        default=None,
        description="Organization ID; missing or nil means no organization"
    )


class FetchFolderResponse(BaseModel):
    """Response containing every folder of an organization."""

    folders: List[Folder] = Field(default_factory=list, description="Folders in source order")


class FolderPaginationRequest(BaseModel):
    """Request for one page of folders."""

    org_id: Optional[UUID] = Field(
        default=None,
        description="Organization ID; missing or nil means no organization"
    )
    per_page: int = Field(description="Maximum number of folders on the page")
    token: str = Field(default="", description="Token returned by the previous page, empty for the first page")


class PaginatedFolderResponse(BaseModel):
    """Response for one page of folders."""

    folders: List[Folder] = Field(default_factory=list, description="Folders on this page")
    token: str = Field(default="", description="Token for the next page, empty when exhausted")
    has_more: bool = Field(default=False, description="Whether more folders are available")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "folders": [
                    {
                        "id": "00001d65-d336-485a-8331-7b53f37e8f51",
                        "name": "sacred-moonstar",
                        "org_id": "c1556e17-b7c0-45a3-a6ae-9546248fb17a",
                        "deleted": False
                    }
                ],
                "token": "MDAwMDFkNjUtZDMzNi00ODVhLTgzMzEtN2I1M2YzN2U4ZjUx",
                "has_more": True
            }
        }
    )


def is_nil_org(org_id: Optional[UUID]) -> bool:
    """Return True when ``org_id`` names no organization."""
    return org_id is None or org_id == NIL_ORG_ID
