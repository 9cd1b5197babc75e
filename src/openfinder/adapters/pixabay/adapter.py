"""Pixabay adapter — Stock photo search via the Pixabay API.

API reference:
  GET https://pixabay.com/api/
    ?key=<api_key>&q=<query>&image_type=photo&per_page=<n>&safesearch=true

Requires an API key. Without one the adapter is skipped and no request is sent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from openfinder.adapters.base.adapter import Provider, ProviderAdapter, ProviderRequest, QueryContext
from openfinder.models.result import ContentType, NormalizedResult

SEARCH_URL = "https://pixabay.com/api/"


class PixabayHit(BaseModel):
    id: int
    tags: str | None = None
    pageURL: str | None = None  # noqa: N815
    webformatURL: str | None = None  # noqa: N815
    likes: int = 0


class PixabaySearchResponse(BaseModel):
    hits: list[Any] = Field(default_factory=list)


class PixabayAdapter(ProviderAdapter[PixabaySearchResponse]):
    """Search adapter for Pixabay photos."""

    provider = Provider.PIXABAY
    source_name = "Pixabay"
    id_prefix = "pix"
    max_items = 5
    response_model = PixabaySearchResponse
    requires_credential = True

    def __init__(self, per_page: int = 5, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._per_page = per_page

    def build_request(self, query: str, context: QueryContext) -> ProviderRequest:
        return ProviderRequest(
            url=SEARCH_URL,
            params={
                "key": self._api_key,
                "q": query,
                "image_type": "photo",
                "per_page": self._per_page,
                "safesearch": "true",
            },
        )

    def normalize(self, response: PixabaySearchResponse, context: QueryContext) -> list[NormalizedResult]:
        results: list[NormalizedResult] = []
        for hit in self.decode_items(response.hits, PixabayHit):
            if not hit.pageURL:
                continue
            results.append(
                NormalizedResult(
                    id=f"{self.id_prefix}-{hit.id}",
                    title=hit.tags or "Image",
                    content_type=ContentType.IMAGE,
                    source_name=self.source_name,
                    source_url=hit.pageURL,
                    preview_url=hit.webformatURL,
                    description=f"High quality image - {hit.likes} likes",
                )
            )
        return results
