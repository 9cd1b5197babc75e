"""Tests for the content-type router."""

from __future__ import annotations

import pytest

from openfinder.adapters.base.adapter import Provider
from openfinder.core.router import route
from openfinder.models.result import TypeFilter

ALL_PROVIDERS = (
    Provider.OPENLIBRARY,
    Provider.GUTENBERG,
    Provider.PIXABAY,
    Provider.UNSPLASH,
    Provider.INTERNET_ARCHIVE,
)
TEXT_PROVIDERS = (Provider.OPENLIBRARY, Provider.GUTENBERG, Provider.INTERNET_ARCHIVE)


class TestRouteTable:

    @pytest.mark.parametrize(
        ("type_filter", "providers", "media_type"),
        [
            ("all", ALL_PROVIDERS, None),
            ("book", TEXT_PROVIDERS, "texts"),
            ("pdf", TEXT_PROVIDERS, "texts"),
            ("video", (Provider.INTERNET_ARCHIVE,), "movies"),
            ("image", (Provider.PIXABAY, Provider.UNSPLASH), None),
            ("dataset", (Provider.INTERNET_ARCHIVE,), "data"),
        ],
    )
    def test_route(self, type_filter: str, providers: tuple[Provider, ...], media_type: str | None) -> None:
        plan = route(type_filter)
        assert plan.providers == providers
        assert plan.archive_media_type == media_type
        assert plan.type_filter is TypeFilter(type_filter)

    def test_image_never_queries_archive(self) -> None:
        assert Provider.INTERNET_ARCHIVE not in route("image").providers


class TestRouteFallback:

    @pytest.mark.parametrize("raw", [None, "", "audio", "BOOK", "all "])
    def test_unknown_filters_route_as_all(self, raw: str | None) -> None:
        plan = route(raw)
        assert plan.type_filter is TypeFilter.ALL
        assert plan.providers == ALL_PROVIDERS
        assert plan.archive_media_type is None

    def test_accepts_enum(self) -> None:
        assert route(TypeFilter.VIDEO).providers == (Provider.INTERNET_ARCHIVE,)

    def test_context_carries_filter_and_media_type(self) -> None:
        context = route("dataset").context
        assert context.type_filter is TypeFilter.DATASET
        assert context.archive_media_type == "data"
