"""Listing schemas for s3-vfs."""

from datetime import datetime

from pydantic import BaseModel, Field


class FolderEntry(BaseModel):
    """A virtual sub-folder derived from a common prefix."""
    name: str = Field(..., description="Folder name without parent or trailing slash")
    path: str = Field(..., description="Full prefix, ending in '/'")
    url: str = Field(..., description="Navigation link, '/?prefix=<path>'")


class ObjectEntry(BaseModel):
    """A stored object directly under the listed prefix."""
    name: str = Field(..., description="Key relative to the listed prefix")
    last_modified: datetime | None = Field(default=None, description="Last write time")
    size: int = Field(default=0, description="Size in bytes")
    path: str = Field(..., description="Full object key")
    url: str = Field(..., description="Public-style object URL")


class DirectoryListing(BaseModel):
    """Immediate children of a prefix."""
    prefix: str = Field(default="", description="Listed prefix")
    folders: list[FolderEntry] = Field(default_factory=list)
    objects: list[ObjectEntry] = Field(default_factory=list)
    truncated: bool = Field(
        default=False, description="Store reported more entries than were listed"
    )
