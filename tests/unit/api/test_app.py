"""Tests for application assembly and adapter auto-registration."""

from __future__ import annotations

from fastapi.testclient import TestClient

from openfinder.api.app import _register_adapters, create_app
from openfinder.api.deps import get_aggregator
from openfinder.config.settings import Settings
from openfinder.core.aggregator import SearchAggregator


class TestAdapterRegistration:

    def test_registers_all_providers_in_precedence_order(self, settings: Settings) -> None:
        aggregator = SearchAggregator(settings)
        _register_adapters(aggregator, settings)
        assert aggregator.adapter_registry.active_adapters == [
            "openlibrary",
            "gutenberg",
            "pixabay",
            "unsplash",
            "internet_archive",
        ]

    def test_passes_keys_and_timeout(self, settings: Settings) -> None:
        settings.providers.pixabay_api_key = "pk"
        aggregator = SearchAggregator(settings)
        _register_adapters(aggregator, settings)

        pixabay = aggregator.adapter_registry.get("pixabay")
        unsplash = aggregator.adapter_registry.get("unsplash")
        assert pixabay.has_credential is True
        assert unsplash.has_credential is False
        assert pixabay._timeout == settings.providers.timeout_seconds

    def test_disabled_provider_is_not_registered(self, settings: Settings) -> None:
        settings.providers.enabled = {"internet_archive": False}
        aggregator = SearchAggregator(settings)
        _register_adapters(aggregator, settings)
        assert "internet_archive" not in aggregator.adapter_registry


class TestLifespan:

    def test_lifespan_wires_aggregator(self, settings: Settings) -> None:
        app = create_app(settings)
        with TestClient(app) as client:
            aggregator = get_aggregator()
            assert len(aggregator.adapter_registry.active_adapters) == 5
            resp = client.get("/search", params={"q": ""})
            assert resp.json() == {"results": []}
