"""
Supabase Storage implementation of the media capability.

Assets are written to a single bucket under a folder per asset kind
(``avatars/``, ``cover-images/``) with a random object name, and are
addressed afterwards either by public URL or by object path.
"""

import logging
import mimetypes
import uuid
from pathlib import PurePosixPath
from typing import Optional
from urllib.parse import unquote, urlparse

from supabase import Client

from .exceptions import MediaDeleteError
from .interfaces import IMediaStorage
from .models import MediaAsset, MediaUpload

logger = logging.getLogger(__name__)


class SupabaseMediaStorage(IMediaStorage):
    """Stores profile media in a Supabase Storage bucket."""

    def __init__(self, client: Client, bucket: str):
        self._client = client
        self._bucket = bucket

    @property
    def _files(self):
        return self._client.storage.from_(self._bucket)

    async def upload(self, file: MediaUpload, folder: str) -> Optional[MediaAsset]:
        """Upload a file; failures are logged and reported as None."""
        if not file.content:
            return None

        path = f"{folder}/{uuid.uuid4().hex}{self._suffix(file)}"
        try:
            self._files.upload(
                path=path,
                file=file.content,
                file_options={"content-type": file.content_type},
            )
            url = self._files.get_public_url(path)
        except Exception as e:
            logger.warning(f"Upload of {file.filename} to {self._bucket} failed: {e}")
            return None

        return MediaAsset(url=url.rstrip("?"), id=path)

    async def delete(self, reference: str) -> None:
        """Delete an asset by its public URL or object path."""
        path = self.object_path(reference)
        if not path:
            raise MediaDeleteError(reference, reason="Unrecognised storage reference")

        try:
            removed = self._files.remove([path])
        except Exception as e:
            raise MediaDeleteError(reference, reason=str(e)) from e

        if not removed:
            raise MediaDeleteError(reference, reason="Object not found")

    def object_path(self, reference: str) -> Optional[str]:
        """
        Resolve a public URL or object path to the object path in the bucket.

        Returns None for URLs that do not point into this bucket.
        """
        if not reference:
            return None
        if "://" not in reference:
            return reference.lstrip("/")

        marker = f"/object/public/{self._bucket}/"
        path = urlparse(reference).path
        if marker not in path:
            return None
        return unquote(path.split(marker, 1)[1]) or None

    @staticmethod
    def _suffix(file: MediaUpload) -> str:
        suffix = PurePosixPath(file.filename).suffix.lower()
        if suffix:
            return suffix
        return mimetypes.guess_extension(file.content_type) or ""
