"""Search aggregator — Fans a query out to providers and merges their results.

Request lifecycle:
  1. Short-circuit empty queries (no provider is contacted)
  2. Route the content-type filter to an ordered provider list
  3. Invoke every selected adapter concurrently, each under its own timeout
  4. Join all outcomes, then concatenate successful results in provider
     precedence order (never in arrival order)

Provider failures never reach the caller: a failed or skipped provider simply
contributes no results.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

import structlog

from openfinder.adapters.base.adapter import ProviderAdapter, QueryContext
from openfinder.adapters.base.outcome import AdapterFailure, AdapterOutcome, AdapterSkipped, AdapterSuccess
from openfinder.adapters.base.registry import AdapterRegistry
from openfinder.core.router import route
from openfinder.models.response import SearchResponse
from openfinder.models.result import NormalizedResult, TypeFilter

if TYPE_CHECKING:
    from openfinder.config.settings import Settings

logger = structlog.get_logger(__name__)


class SearchAggregator:
    """Core orchestrator for multi-provider searches.

    Attributes:
        settings: Application configuration.
        adapter_registry: Registry of provider adapters.
    """

    def __init__(self, settings: Settings, adapter_registry: AdapterRegistry | None = None) -> None:
        self.settings = settings
        self.adapter_registry = adapter_registry or AdapterRegistry()

    @property
    def timeout_seconds(self) -> float:
        return self.settings.providers.timeout_seconds

    async def initialize(self) -> None:
        """Initialize all registered adapters."""
        await self.adapter_registry.initialize_all()
        logger.info("aggregator_initialized", adapters=self.adapter_registry.active_adapters)

    async def shutdown(self) -> None:
        """Gracefully shut down all adapters."""
        await self.adapter_registry.shutdown_all()
        logger.info("aggregator_shut_down")

    async def search(self, query: str | None, type_filter: TypeFilter | str | None = None) -> SearchResponse:
        """Run one aggregated search.

        Args:
            query: The user's query. Empty or missing returns no results.
            type_filter: Content-type filter; unknown values mean ``all``.

        Returns:
            A SearchResponse with results concatenated by provider precedence.
        """
        if not query or not query.strip():
            return SearchResponse(results=[])

        start_time = time.monotonic()
        plan = route(type_filter)
        context = plan.context

        adapters: list[ProviderAdapter] = []
        for provider in plan.providers:
            if provider.value not in self.adapter_registry:
                logger.info("provider_not_registered", provider=provider.value)
                continue
            adapters.append(self.adapter_registry.get(provider.value))

        outcomes = await asyncio.gather(
            *(self._invoke(adapter, query, context) for adapter in adapters),
            return_exceptions=True,
        )

        results: list[NormalizedResult] = []
        for adapter, outcome in zip(adapters, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                outcome = AdapterFailure(provider=adapter.name, error=str(outcome), error_type=type(outcome).__name__)
            results.extend(self._collect(outcome))

        logger.info(
            "search_complete",
            query=query,
            type_filter=plan.type_filter.value,
            providers=[a.name for a in adapters],
            results=len(results),
            took_ms=int((time.monotonic() - start_time) * 1000),
        )
        return SearchResponse(results=results)

    async def _invoke(self, adapter: ProviderAdapter, query: str, context: QueryContext) -> AdapterOutcome:
        """Call one adapter, bounding it by the per-provider timeout."""
        try:
            return await asyncio.wait_for(adapter.search(query, context), timeout=self.timeout_seconds)
        except TimeoutError:
            return AdapterFailure(
                provider=adapter.name,
                error=f"timed out after {self.timeout_seconds:.1f}s",
                error_type="TimeoutError",
            )

    @staticmethod
    def _collect(outcome: AdapterOutcome) -> list[NormalizedResult]:
        match outcome:
            case AdapterSuccess(provider=provider, results=results, took_ms=took_ms):
                logger.debug("provider_succeeded", provider=provider, results=len(results), took_ms=took_ms)
                return list(results)
            case AdapterSkipped(provider=provider, reason=reason):
                logger.info("provider_skipped", provider=provider, reason=reason)
                return []
            case AdapterFailure(provider=provider, error=error, error_type=error_type):
                logger.warning("provider_failed", provider=provider, error=error, error_type=error_type)
                return []
        return []
