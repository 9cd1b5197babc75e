"""Tests for the OpenLibrary adapter."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from openfinder.adapters.base.adapter import QueryContext
from openfinder.adapters.base.outcome import AdapterSuccess
from openfinder.adapters.openlibrary.adapter import OpenLibraryAdapter
from openfinder.models.result import ContentType


@pytest.fixture
def adapter() -> OpenLibraryAdapter:
    return OpenLibraryAdapter()


class TestOpenLibraryRequest:

    def test_request_parameters(self, adapter: OpenLibraryAdapter) -> None:
        request = adapter.build_request("dune", QueryContext())
        assert request.url == "https://openlibrary.org/search.json"
        assert request.params["q"] == "dune"
        assert request.params["limit"] == 10
        assert request.params["fields"] == "title,author_name,cover_i,key,first_publish_year,format"
        assert request.headers == {}


class TestOpenLibraryNormalize:

    def test_maps_full_doc(self, adapter: OpenLibraryAdapter, openlibrary_payload: dict[str, Any]) -> None:
        results = adapter.parse_response(openlibrary_payload, QueryContext())

        first = results[0]
        assert first.id == "ol-OL893415W"
        assert first.title == "Dune"
        assert first.source_name == "OpenLibrary"
        assert first.source_url == "https://openlibrary.org/works/OL893415W"
        assert first.preview_url == "https://covers.openlibrary.org/b/id/11481354-M.jpg"
        assert first.description == "First published: 1965"
        assert first.author == "Frank Herbert"

    def test_pdf_format_classifies_as_pdf(self, adapter: OpenLibraryAdapter, openlibrary_payload: dict[str, Any]) -> None:
        results = adapter.parse_response(openlibrary_payload, QueryContext())
        assert results[0].content_type is ContentType.PDF
        assert results[1].content_type is ContentType.BOOK

    def test_missing_year_renders_unknown(self, adapter: OpenLibraryAdapter, openlibrary_payload: dict[str, Any]) -> None:
        results = adapter.parse_response(openlibrary_payload, QueryContext())
        assert results[1].description == "First published: Unknown"
        assert results[1].preview_url is None

    def test_title_and_author_fallbacks(self, adapter: OpenLibraryAdapter) -> None:
        results = adapter.parse_response({"docs": [{"key": "/works/OL1W"}]}, QueryContext())
        assert results[0].title == "Untitled"
        assert results[0].author is None

    def test_docs_without_key_are_dropped(self, adapter: OpenLibraryAdapter) -> None:
        results = adapter.parse_response({"docs": [{"title": "Orphan"}, {"key": "/works/OL2W"}]}, QueryContext())
        assert [r.id for r in results] == ["ol-OL2W"]

    def test_caps_at_eight_items(self, adapter: OpenLibraryAdapter) -> None:
        payload = {"docs": [{"key": f"/works/OL{i}W", "title": f"Book {i}"} for i in range(10)]}
        results = adapter.parse_response(payload, QueryContext())
        assert len(results) == 8
        assert results[-1].id == "ol-OL7W"

    def test_missing_docs_is_empty(self, adapter: OpenLibraryAdapter) -> None:
        assert adapter.parse_response({}, QueryContext()) == []


class TestOpenLibrarySearch:

    @pytest.mark.asyncio
    async def test_search_returns_success(
        self, adapter: OpenLibraryAdapter, openlibrary_payload: dict[str, Any], make_response: Any
    ) -> None:
        await adapter.initialize()
        adapter._client.get = AsyncMock(return_value=make_response(openlibrary_payload))  # type: ignore[union-attr]

        outcome = await adapter.search("dune")

        assert isinstance(outcome, AdapterSuccess)
        assert outcome.provider == "openlibrary"
        assert len(outcome.results) == 2
        call_args = adapter._client.get.call_args  # type: ignore[union-attr]
        assert call_args.kwargs["params"]["q"] == "dune"

        await adapter.shutdown()
