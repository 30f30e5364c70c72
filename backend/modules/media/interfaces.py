"""
Media module interface.

The users module depends on IMediaStorage; the Supabase-backed
implementation lives in storage.py.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import MediaAsset, MediaUpload


@runtime_checkable
class IMediaStorage(Protocol):
    """Upload and delete binary assets addressed by URL or identifier."""

    async def upload(self, file: MediaUpload, folder: str) -> Optional[MediaAsset]:
        """
        Store a file.

        Returns:
            The stored asset, or None if the upload failed
        """
        ...

    async def delete(self, reference: str) -> None:
        """
        Delete an asset by public URL or storage identifier.

        Raises:
            MediaDeleteError: If the reference is unrecognised or deletion fails
        """
        ...
