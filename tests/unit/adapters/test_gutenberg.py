"""Tests for the Project Gutenberg adapter."""

from __future__ import annotations

from typing import Any

import pytest

from openfinder.adapters.base.adapter import QueryContext
from openfinder.adapters.gutenberg.adapter import GutenbergAdapter
from openfinder.models.result import ContentType, TypeFilter


@pytest.fixture
def adapter() -> GutenbergAdapter:
    return GutenbergAdapter()


class TestGutenbergAdapter:

    def test_request_parameters(self, adapter: GutenbergAdapter) -> None:
        request = adapter.build_request("frankenstein", QueryContext())
        assert request.url == "https://gutendex.com/books"
        assert request.params == {"search": "frankenstein", "limit": 5}

    def test_maps_book(self, adapter: GutenbergAdapter, gutenberg_payload: dict[str, Any]) -> None:
        [result] = adapter.parse_response(gutenberg_payload, QueryContext())

        assert result.id == "pg-84"
        assert result.title == "Frankenstein; Or, The Modern Prometheus"
        assert result.source_name == "Project Gutenberg"
        assert result.source_url == "https://www.gutenberg.org/ebooks/84"
        assert result.preview_url == "https://www.gutenberg.org/cache/epub/84/pg84.cover.medium.jpg"
        assert result.description == "Public domain book with 92716 downloads"
        assert result.author == "Shelley, Mary Wollstonecraft"

    def test_always_pdf(self, adapter: GutenbergAdapter, gutenberg_payload: dict[str, Any]) -> None:
        for type_filter in (TypeFilter.ALL, TypeFilter.BOOK):
            [result] = adapter.parse_response(gutenberg_payload, QueryContext(type_filter=type_filter))
            assert result.content_type is ContentType.PDF

    def test_png_cover_used_when_no_jpeg(self, adapter: GutenbergAdapter) -> None:
        payload = {"results": [{"id": 1, "title": "T", "formats": {"image/png": "https://example.org/c.png"}}]}
        [result] = adapter.parse_response(payload, QueryContext())
        assert result.preview_url == "https://example.org/c.png"

    def test_no_authors_no_cover(self, adapter: GutenbergAdapter) -> None:
        payload = {"results": [{"id": 2, "title": None, "authors": [], "formats": {}}]}
        [result] = adapter.parse_response(payload, QueryContext())
        assert result.author is None
        assert result.preview_url is None
        assert result.title == "Untitled"

    def test_missing_download_count_renders_zero(self, adapter: GutenbergAdapter) -> None:
        payload = {"results": [{"id": 3, "title": "T", "download_count": None}]}
        [result] = adapter.parse_response(payload, QueryContext())
        assert result.description == "Public domain book with 0 downloads"

    def test_caps_at_five_items(self, adapter: GutenbergAdapter) -> None:
        payload = {"results": [{"id": i, "title": f"Book {i}"} for i in range(32)]}
        assert len(adapter.parse_response(payload, QueryContext())) == 5
