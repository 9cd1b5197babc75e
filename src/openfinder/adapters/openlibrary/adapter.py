"""OpenLibrary adapter — Book metadata search via the OpenLibrary search API.

API reference:
  GET https://openlibrary.org/search.json
    ?q=<query>
    &limit=<n>
    &fields=title,author_name,cover_i,key,first_publish_year,format

Works whose ``format`` list advertises a PDF edition are classified ``pdf``;
everything else is a ``book``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from openfinder.adapters.base.adapter import Provider, ProviderAdapter, ProviderRequest, QueryContext
from openfinder.models.result import ContentType, NormalizedResult

SEARCH_URL = "https://openlibrary.org/search.json"
COVER_URL = "https://covers.openlibrary.org/b/id/{cover_id}-M.jpg"
WORK_URL = "https://openlibrary.org{key}"

_FIELDS = "title,author_name,cover_i,key,first_publish_year,format"


class OpenLibraryDoc(BaseModel):
    key: str | None = None
    title: str | None = None
    author_name: list[str] | None = None
    cover_i: int | None = None
    first_publish_year: int | None = None
    format: list[str] | None = None


class OpenLibrarySearchResponse(BaseModel):
    docs: list[Any] = Field(default_factory=list)


class OpenLibraryAdapter(ProviderAdapter[OpenLibrarySearchResponse]):
    """Search adapter for OpenLibrary works.

    Args:
        limit: Number of works requested from the API (``max_items`` are kept).
        **kwargs: Passed through to ``ProviderAdapter``.
    """

    provider = Provider.OPENLIBRARY
    source_name = "OpenLibrary"
    id_prefix = "ol"
    max_items = 8
    response_model = OpenLibrarySearchResponse

    def __init__(self, limit: int = 10, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._limit = limit

    def build_request(self, query: str, context: QueryContext) -> ProviderRequest:
        return ProviderRequest(
            url=SEARCH_URL,
            params={"q": query, "limit": self._limit, "fields": _FIELDS},
        )

    def normalize(self, response: OpenLibrarySearchResponse, context: QueryContext) -> list[NormalizedResult]:
        results: list[NormalizedResult] = []
        for doc in self.decode_items(response.docs, OpenLibraryDoc)[: self.max_items]:
            if not doc.key:
                continue
            work_id = doc.key.replace("/works/", "")
            has_pdf = bool(doc.format) and "pdf" in doc.format  # type: ignore[operator]

            results.append(
                NormalizedResult(
                    id=f"{self.id_prefix}-{work_id}",
                    title=doc.title or "Untitled",
                    content_type=ContentType.PDF if has_pdf else ContentType.BOOK,
                    source_name=self.source_name,
                    source_url=WORK_URL.format(key=doc.key),
                    preview_url=COVER_URL.format(cover_id=doc.cover_i) if doc.cover_i else None,
                    description=f"First published: {doc.first_publish_year or 'Unknown'}",
                    author=doc.author_name[0] if doc.author_name else None,
                )
            )
        return results
