"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from openfinder.config.settings import Settings


@pytest.fixture(autouse=True)
def _no_bare_provider_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer API keys in the environment out of the tests."""
    monkeypatch.delenv("PIXABAY_API_KEY", raising=False)
    monkeypatch.delenv("UNSPLASH_API_KEY", raising=False)


@pytest.fixture
def settings(tmp_path: Any) -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        providers={"timeout_seconds": 2.0},
        uploads={"directory": tmp_path / "uploads"},
    )


def _make_response(payload: Any, status_code: int = 200) -> MagicMock:
    """Build a mock ``httpx.Response`` returning *payload* from ``.json()``."""
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = payload
    if status_code >= 400:
        mock_response.text = "error"
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Server Error", request=MagicMock(), response=mock_response
        )
    else:
        mock_response.raise_for_status = MagicMock()
    return mock_response


@pytest.fixture
def make_response() -> Any:
    """Factory fixture for mock provider responses."""
    return _make_response


# ── Provider payloads (trimmed copies of real API responses) ──


@pytest.fixture
def openlibrary_payload() -> dict[str, Any]:
    return {
        "numFound": 2,
        "docs": [
            {
                "key": "/works/OL893415W",
                "title": "Dune",
                "author_name": ["Frank Herbert", "Brian Herbert"],
                "cover_i": 11481354,
                "first_publish_year": 1965,
                "format": ["pdf", "epub"],
            },
            {
                "key": "/works/OL15358691W",
                "title": "Dune Messiah",
                "author_name": ["Frank Herbert"],
                "first_publish_year": None,
            },
        ],
    }


@pytest.fixture
def gutenberg_payload() -> dict[str, Any]:
    return {
        "count": 1,
        "results": [
            {
                "id": 84,
                "title": "Frankenstein; Or, The Modern Prometheus",
                "authors": [{"name": "Shelley, Mary Wollstonecraft", "birth_year": 1797, "death_year": 1851}],
                "formats": {
                    "text/html": "https://www.gutenberg.org/ebooks/84.html.images",
                    "image/jpeg": "https://www.gutenberg.org/cache/epub/84/pg84.cover.medium.jpg",
                },
                "download_count": 92716,
            },
        ],
    }


@pytest.fixture
def pixabay_payload() -> dict[str, Any]:
    return {
        "total": 3,
        "totalHits": 3,
        "hits": [
            {
                "id": 195893,
                "pageURL": "https://pixabay.com/photos/mountains-landscape-195893/",
                "tags": "mountains, landscape, nature",
                "webformatURL": "https://pixabay.com/get/195893_640.jpg",
                "likes": 412,
                "user": "Hans",
            },
            {
                "id": 195894,
                "pageURL": "https://pixabay.com/photos/alps-195894/",
                "tags": "",
                "webformatURL": "https://pixabay.com/get/195894_640.jpg",
                "likes": 7,
            },
            {
                "id": 195895,
                "pageURL": "https://pixabay.com/photos/peak-195895/",
                "tags": "peak",
                "webformatURL": "https://pixabay.com/get/195895_640.jpg",
                "likes": 0,
            },
        ],
    }


@pytest.fixture
def unsplash_payload() -> dict[str, Any]:
    return {
        "total": 2,
        "results": [
            {
                "id": "eOLpJytrbsQ",
                "alt_description": "snow covered mountain under blue sky",
                "description": "Matterhorn",
                "likes": 1203,
                "links": {"html": "https://unsplash.com/photos/eOLpJytrbsQ"},
                "urls": {"regular": "https://images.unsplash.com/photo-1?w=1080"},
                "user": {"name": "Jane Doe"},
            },
            {
                "id": "Zq9nBm1",
                "alt_description": None,
                "description": None,
                "likes": 5,
                "links": {"html": "https://unsplash.com/photos/Zq9nBm1"},
                "urls": {"regular": "https://images.unsplash.com/photo-2?w=1080"},
                "user": {"name": "John Roe"},
            },
        ],
    }


@pytest.fixture
def archive_payload() -> dict[str, Any]:
    return {
        "responseHeader": {"status": 0},
        "response": {
            "numFound": 1,
            "start": 0,
            "docs": [
                {
                    "identifier": "dune00herb",
                    "title": "Dune",
                    "creator": ["Herbert, Frank", "Herbert, Brian"],
                    "format": ["PDF", "Abbyy GZ", "DjVu"],
                    "year": "1965",
                },
            ],
        },
    }
