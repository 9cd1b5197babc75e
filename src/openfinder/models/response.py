"""Response models — Envelopes returned by the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from openfinder.models.result import NormalizedResult


class SearchResponse(BaseModel):
    """Aggregated search response.

    ``results`` holds whatever the invoked providers managed to return,
    concatenated in provider precedence order. It is empty (not an error)
    when the query is empty or every provider failed.
    """

    results: list[NormalizedResult] = Field(default_factory=list, description="Normalized results")


# ── Upload store ─────────────────────────────────────────────────────────


class UploadedFile(BaseModel):
    """Metadata of a freshly stored upload."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Stored file name (<uuid><extension>)")
    original_name: str = Field(alias="originalName", description="Client-supplied file name")
    size: int = Field(description="Size in bytes")
    type: str = Field(description="MIME type")
    url: str = Field(description="Public URL of the stored file")
    uploaded_at: datetime = Field(alias="uploadedAt", description="Upload timestamp (UTC)")


class UploadResponse(BaseModel):
    """Successful upload response."""

    success: bool = Field(default=True)
    file: UploadedFile


class StoredFile(BaseModel):
    """A file present in the upload directory."""

    id: str = Field(description="Stored file name")
    url: str = Field(description="Public URL of the stored file")


class FileListResponse(BaseModel):
    """Listing of stored uploads."""

    files: list[StoredFile] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body for rejected requests."""

    error: str
