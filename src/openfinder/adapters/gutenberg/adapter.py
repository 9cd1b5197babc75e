"""Project Gutenberg adapter — Public-domain book search via the Gutendex API.

API reference:
  GET https://gutendex.com/books?search=<query>&limit=<n>

Every Gutenberg title is a freely downloadable public-domain text, so results
are always classified ``pdf``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from openfinder.adapters.base.adapter import Provider, ProviderAdapter, ProviderRequest, QueryContext
from openfinder.models.result import ContentType, NormalizedResult

SEARCH_URL = "https://gutendex.com/books"
EBOOK_URL = "https://www.gutenberg.org/ebooks/{book_id}"

_COVER_MIME_TYPES = ("image/jpeg", "image/png")


class GutendexAuthor(BaseModel):
    name: str | None = None


class GutendexBook(BaseModel):
    id: int
    title: str | None = None
    authors: list[GutendexAuthor] = Field(default_factory=list)
    formats: dict[str, str] = Field(default_factory=dict)
    download_count: int | None = None


class GutendexSearchResponse(BaseModel):
    results: list[Any] = Field(default_factory=list)


class GutenbergAdapter(ProviderAdapter[GutendexSearchResponse]):
    """Search adapter for Project Gutenberg (through Gutendex)."""

    provider = Provider.GUTENBERG
    source_name = "Project Gutenberg"
    id_prefix = "pg"
    max_items = 5
    response_model = GutendexSearchResponse

    def __init__(self, limit: int = 5, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._limit = limit

    def build_request(self, query: str, context: QueryContext) -> ProviderRequest:
        return ProviderRequest(url=SEARCH_URL, params={"search": query, "limit": self._limit})

    def normalize(self, response: GutendexSearchResponse, context: QueryContext) -> list[NormalizedResult]:
        results: list[NormalizedResult] = []
        for book in self.decode_items(response.results, GutendexBook):
            cover_url = next(
                (book.formats[mime] for mime in _COVER_MIME_TYPES if book.formats.get(mime)),
                None,
            )
            results.append(
                NormalizedResult(
                    id=f"{self.id_prefix}-{book.id}",
                    title=book.title or "Untitled",
                    content_type=ContentType.PDF,
                    source_name=self.source_name,
                    source_url=EBOOK_URL.format(book_id=book.id),
                    preview_url=cover_url,
                    description=f"Public domain book with {book.download_count or 0} downloads",
                    author=book.authors[0].name if book.authors else None,
                )
            )
        return results
