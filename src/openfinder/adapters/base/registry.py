"""Adapter Registry — Holds the provider adapter instances of a running service.

The registry owns adapter lifecycles (initialize at startup, shut down at
exit) and lets the aggregator look adapters up by provider name.
"""

from __future__ import annotations

import logging

from openfinder.adapters.base.adapter import AdapterHealth, ProviderAdapter

logger = logging.getLogger(__name__)


class AdapterNotFoundError(Exception):
    """Raised when a requested adapter is not registered."""


class AdapterRegistry:
    """Registry of provider adapter instances keyed by provider name.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register(GutenbergAdapter())
        >>> await registry.initialize_all()
        >>> adapter = registry.get("gutenberg")
    """

    def __init__(self) -> None:
        self._instances: dict[str, ProviderAdapter] = {}

    def register(self, adapter: ProviderAdapter) -> None:
        """Register an adapter instance under its provider name.

        Args:
            adapter: The adapter to register.
        """
        if adapter.name in self._instances:
            logger.warning("Overwriting existing adapter registration: %s", adapter.name)
        self._instances[adapter.name] = adapter
        logger.info("Registered adapter: %s", adapter.name)

    async def initialize_all(self) -> None:
        """Initialize every registered adapter."""
        for adapter in self._instances.values():
            await adapter.initialize()

    def get(self, name: str) -> ProviderAdapter:
        """Get a registered adapter by provider name.

        Raises:
            AdapterNotFoundError: If no adapter is registered under this name.
        """
        if name not in self._instances:
            raise AdapterNotFoundError(
                f"No adapter registered with name '{name}'. "
                f"Available adapters: {list(self._instances.keys())}"
            )
        return self._instances[name]

    def __contains__(self, name: object) -> bool:
        return name in self._instances

    async def health_check_all(self) -> dict[str, AdapterHealth]:
        """Run health checks on all registered adapters.

        Returns:
            Dictionary mapping adapter names to their health status.
        """
        results: dict[str, AdapterHealth] = {}
        for name, adapter in self._instances.items():
            try:
                results[name] = await adapter.health_check()
            except Exception as e:
                results[name] = AdapterHealth(status="unhealthy", message=str(e))
        return results

    async def shutdown_all(self) -> None:
        """Gracefully shut down all registered adapters."""
        for name, adapter in self._instances.items():
            try:
                await adapter.shutdown()
                logger.info("Shut down adapter: %s", name)
            except Exception:
                logger.warning("Error shutting down adapter: %s", name, exc_info=True)
        self._instances.clear()

    @property
    def active_adapters(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._instances.keys())

    @property
    def missing_credentials(self) -> list[str]:
        """Names of registered adapters that need an API key but have none."""
        return [name for name, adapter in self._instances.items() if not adapter.has_credential]
