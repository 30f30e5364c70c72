"""
Media module.

Uploads and deletes profile images (avatars, cover images) in external
storage.
"""

from .interfaces import IMediaStorage
from .models import MediaAsset, MediaUpload
from .exceptions import MediaUploadError, MediaDeleteError

__all__ = [
    "IMediaStorage",
    "MediaAsset",
    "MediaUpload",
    "MediaUploadError",
    "MediaDeleteError",
]
