"""Local storage for uploaded files."""

from openfinder.storage.uploads import UploadError, UploadStore

__all__ = ["UploadError", "UploadStore"]
