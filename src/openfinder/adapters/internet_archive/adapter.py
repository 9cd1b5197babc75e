"""Internet Archive adapter — Mixed-media search via the Advanced Search API.

API reference:
  GET https://archive.org/advancedsearch.php
    ?q=<query>[ AND mediatype:(<type>)]
    &fl[]=identifier,format,title,creator,year
    &rows=<n>
    &output=json

The archive hosts books, films and datasets in one catalog, so the caller's
content-type filter is translated into a ``mediatype`` clause by the type
router and each hit is classified from its file formats.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from openfinder.adapters.base.adapter import Provider, ProviderAdapter, ProviderRequest, QueryContext
from openfinder.models.result import ContentType, NormalizedResult, TypeFilter

SEARCH_URL = "https://archive.org/advancedsearch.php"
DETAILS_URL = "https://archive.org/details/{identifier}"
THUMBNAIL_URL = "https://archive.org/services/img/{identifier}"

_FIELDS = "identifier,format,title,creator,year"

VIDEO_FORMAT = "MPEG4"
PDF_FORMAT = "PDF"


def _as_list(value: Any) -> list[str]:
    """Archive metadata fields are a scalar for one value and a list for many."""
    if value is None:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


class ArchiveDoc(BaseModel):
    identifier: str
    title: str | None = None
    creator: list[str] = Field(default_factory=list)
    format: list[str] = Field(default_factory=list)
    year: str | None = None

    @field_validator("creator", "format", mode="before")
    @classmethod
    def _coerce_list(cls, v: Any) -> list[str]:
        return _as_list(v)

    @field_validator("title", "year", mode="before")
    @classmethod
    def _coerce_scalar(cls, v: Any) -> str | None:
        values = _as_list(v)
        return values[0] if values else None


class ArchiveResponseBody(BaseModel):
    docs: list[Any] = Field(default_factory=list)


class ArchiveSearchResponse(BaseModel):
    response: ArchiveResponseBody = Field(default_factory=ArchiveResponseBody)


def resolve_content_type(formats: list[str], type_filter: TypeFilter) -> ContentType:
    """Classify an archive item.

    Video formats win over PDF, PDF wins over the dataset filter, and
    anything else is a book.
    """
    if VIDEO_FORMAT in formats:
        return ContentType.VIDEO
    if PDF_FORMAT in formats:
        return ContentType.PDF
    if type_filter is TypeFilter.DATASET:
        return ContentType.DATASET
    return ContentType.BOOK


class InternetArchiveAdapter(ProviderAdapter[ArchiveSearchResponse]):
    """Search adapter for the Internet Archive."""

    provider = Provider.INTERNET_ARCHIVE
    source_name = "Internet Archive"
    id_prefix = "ia"
    max_items = 5
    response_model = ArchiveSearchResponse

    def __init__(self, rows: int = 5, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._rows = rows

    def build_request(self, query: str, context: QueryContext) -> ProviderRequest:
        q = query
        if context.archive_media_type:
            q += f" AND mediatype:({context.archive_media_type})"
        return ProviderRequest(
            url=SEARCH_URL,
            params={"q": q, "fl[]": _FIELDS, "rows": self._rows, "output": "json"},
        )

    def normalize(self, response: ArchiveSearchResponse, context: QueryContext) -> list[NormalizedResult]:
        results: list[NormalizedResult] = []
        for doc in self.decode_items(response.response.docs, ArchiveDoc):
            if not doc.identifier:
                continue
            results.append(
                NormalizedResult(
                    id=f"{self.id_prefix}-{doc.identifier}",
                    title=doc.title or doc.identifier,
                    content_type=resolve_content_type(doc.format, context.type_filter),
                    source_name=self.source_name,
                    source_url=DETAILS_URL.format(identifier=doc.identifier),
                    preview_url=THUMBNAIL_URL.format(identifier=doc.identifier),
                    description=f"Year: {doc.year or 'Unknown'}",
                    author=doc.creator[0] if doc.creator else None,
                )
            )
        return results
