"""Unsplash adapter — Stock photo search via the Unsplash API.

API reference:
  GET https://api.unsplash.com/search/photos?query=<query>&per_page=<n>
  Authorization: Client-ID <access_key>

Requires an access key. Without one the adapter is skipped and no request is sent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from openfinder.adapters.base.adapter import Provider, ProviderAdapter, ProviderRequest, QueryContext
from openfinder.models.result import ContentType, NormalizedResult

SEARCH_URL = "https://api.unsplash.com/search/photos"


class UnsplashLinks(BaseModel):
    html: str | None = None


class UnsplashUrls(BaseModel):
    regular: str | None = None


class UnsplashUser(BaseModel):
    name: str | None = None


class UnsplashPhoto(BaseModel):
    id: str
    alt_description: str | None = None
    description: str | None = None
    likes: int = 0
    links: UnsplashLinks = Field(default_factory=UnsplashLinks)
    urls: UnsplashUrls = Field(default_factory=UnsplashUrls)
    user: UnsplashUser = Field(default_factory=UnsplashUser)


class UnsplashSearchResponse(BaseModel):
    results: list[Any] = Field(default_factory=list)


class UnsplashAdapter(ProviderAdapter[UnsplashSearchResponse]):
    """Search adapter for Unsplash photos."""

    provider = Provider.UNSPLASH
    source_name = "Unsplash"
    id_prefix = "uns"
    max_items = 5
    response_model = UnsplashSearchResponse
    requires_credential = True

    def __init__(self, per_page: int = 5, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._per_page = per_page

    def build_request(self, query: str, context: QueryContext) -> ProviderRequest:
        return ProviderRequest(
            url=SEARCH_URL,
            params={"query": query, "per_page": self._per_page},
            headers={"Authorization": f"Client-ID {self._api_key}"},
        )

    def normalize(self, response: UnsplashSearchResponse, context: QueryContext) -> list[NormalizedResult]:
        results: list[NormalizedResult] = []
        for photo in self.decode_items(response.results, UnsplashPhoto):
            if not photo.links.html:
                continue
            results.append(
                NormalizedResult(
                    id=f"{self.id_prefix}-{photo.id}",
                    title=photo.alt_description or photo.description or "Unsplash Photo",
                    content_type=ContentType.IMAGE,
                    source_name=self.source_name,
                    source_url=photo.links.html,
                    preview_url=photo.urls.regular,
                    description=f"By {photo.user.name or 'Unknown'} - {photo.likes} likes",
                )
            )
        return results
