"""
Media module data models.
"""

from pydantic import BaseModel, Field


class MediaUpload(BaseModel):
    """A file received from a client, ready to be stored."""

    filename: str
    content_type: str = "application/octet-stream"
    content: bytes = Field(..., repr=False)


class MediaAsset(BaseModel):
    """A stored asset: its public URL and the storage identifier."""

    url: str
    id: str
