"""Upload store — Validated file writes into a local upload directory.

Files are stored under a random ``<uuid4><extension>`` name so client-supplied
names never touch the filesystem, and are served back under
``UploadSettings.url_prefix``.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import UTC, datetime
from pathlib import Path

from openfinder.config.settings import UploadSettings
from openfinder.models.response import StoredFile, UploadedFile

logger = logging.getLogger(__name__)


class UploadError(Exception):
    """Base exception for rejected uploads."""


class MissingFileError(UploadError):
    """Raised when the request carries no file."""


class UnsupportedFileTypeError(UploadError):
    """Raised when the file's MIME type is not allowed."""


class FileTooLargeError(UploadError):
    """Raised when the file exceeds the configured size limit."""


class UploadStore:
    """Writes and lists uploaded files.

    Args:
        settings: Upload configuration (directory, limits, allowed types).
    """

    def __init__(self, settings: UploadSettings) -> None:
        self.settings = settings

    @property
    def directory(self) -> Path:
        return Path(self.settings.directory)

    def validate(self, content_type: str | None, size: int) -> None:
        """Check MIME type and size against the configured limits.

        Raises:
            UnsupportedFileTypeError: If the type is not in ``allowed_types``.
            FileTooLargeError: If ``size`` exceeds ``max_size_bytes``.
        """
        if content_type not in self.settings.allowed_types:
            raise UnsupportedFileTypeError(
                "Invalid file type. Only PDF, EPUB, JPEG, PNG, MP4, ZIP, and TXT files are allowed."
            )
        if size > self.settings.max_size_bytes:
            limit_mb = self.settings.max_size_bytes // (1024 * 1024)
            raise FileTooLargeError(f"File size exceeds maximum limit of {limit_mb}MB")

    async def save(self, filename: str | None, content_type: str | None, data: bytes) -> UploadedFile:
        """Validate and persist one file.

        Args:
            filename: Client-supplied file name (only its extension is kept).
            content_type: Declared MIME type.
            data: File contents.

        Returns:
            Metadata describing the stored file.
        """
        self.validate(content_type, len(data))

        original_name = filename or ""
        stored_name = f"{uuid.uuid4()}{Path(original_name).suffix}"
        target = self.directory / stored_name

        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write, target, data)
        logger.info("Stored upload %s (%d bytes, %s)", stored_name, len(data), content_type)

        return UploadedFile(
            id=stored_name,
            original_name=original_name,
            size=len(data),
            type=content_type or "",
            url=self._url_for(stored_name),
            uploaded_at=datetime.now(UTC),
        )

    def list_files(self) -> list[StoredFile]:
        """List stored files; a missing upload directory means no files."""
        if not self.directory.is_dir():
            return []
        return [
            StoredFile(id=path.name, url=self._url_for(path.name))
            for path in sorted(self.directory.iterdir())
            if path.is_file()
        ]

    def _url_for(self, name: str) -> str:
        return f"{self.settings.url_prefix.rstrip('/')}/{name}"

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
