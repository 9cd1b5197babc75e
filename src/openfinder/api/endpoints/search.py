"""Search endpoint — Aggregated open-content search across all providers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from openfinder.api.deps import get_aggregator
from openfinder.core.aggregator import SearchAggregator
from openfinder.models.response import SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    summary="Aggregated Search",
    description=(
        "Search OpenLibrary, Project Gutenberg, Pixabay, Unsplash and the "
        "Internet Archive in one call.\n\n"
        "**Type filter → providers:**\n"
        "| `type` | Providers (in result order) |\n"
        "|--------|-----------------------------|\n"
        "| `all` (default) | OpenLibrary, Project Gutenberg, Pixabay, Unsplash, Internet Archive |\n"
        "| `book`, `pdf` | OpenLibrary, Project Gutenberg, Internet Archive |\n"
        "| `video`, `dataset` | Internet Archive |\n"
        "| `image` | Pixabay, Unsplash |\n\n"
        "Unknown `type` values are treated as `all`. Provider failures never "
        "fail the request: the response holds whatever could be gathered."
    ),
)
async def search(
    q: str | None = Query(default=None, description="Search query; empty returns no results"),
    type_filter: str | None = Query(default=None, alias="type", description="Content-type filter"),
    aggregator: SearchAggregator = Depends(get_aggregator),
) -> SearchResponse:
    """Run an aggregated search.

    Args:
        q: The search query.
        type_filter: One of all, book, video, image, pdf, dataset.
        aggregator: The search aggregator (injected).

    Returns:
        A SearchResponse; always HTTP 200.
    """
    try:
        return await aggregator.search(q, type_filter)
    except Exception as e:
        logger.error("Search failed: %s", e, exc_info=True)
        return SearchResponse(results=[])
