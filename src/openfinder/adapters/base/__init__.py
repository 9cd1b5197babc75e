"""Base adapter interface — Abstract classes for provider connectors."""

from openfinder.adapters.base.adapter import Provider, ProviderAdapter, ProviderRequest, QueryContext
from openfinder.adapters.base.outcome import AdapterFailure, AdapterOutcome, AdapterSkipped, AdapterSuccess
from openfinder.adapters.base.registry import AdapterRegistry

__all__ = [
    "AdapterFailure",
    "AdapterOutcome",
    "AdapterRegistry",
    "AdapterSkipped",
    "AdapterSuccess",
    "Provider",
    "ProviderAdapter",
    "ProviderRequest",
    "QueryContext",
]
