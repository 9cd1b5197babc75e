"""Adapter-specific exceptions.

These never leave an adapter: ``ProviderAdapter.search()`` converts them into
an ``AdapterFailure`` outcome at the adapter boundary. A missing credential is
not an error: it yields ``AdapterSkipped`` before any request is built.
"""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter cannot reach the provider (network error, timeout)."""


class QueryError(AdapterError):
    """Raised when the provider rejects a search request (non-2xx response)."""


class ResponseFormatError(AdapterError):
    """Raised when the provider's response body is not the expected JSON shape."""
