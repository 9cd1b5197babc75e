"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from openfinder.core.aggregator import SearchAggregator
from openfinder.storage.uploads import UploadStore

# Global instances (set during application lifespan)
_aggregator: SearchAggregator | None = None
_upload_store: UploadStore | None = None


def set_aggregator(aggregator: SearchAggregator | None) -> None:
    """Set the global aggregator instance (called during app lifespan)."""
    global _aggregator
    _aggregator = aggregator


def get_aggregator() -> SearchAggregator:
    """Get the global search aggregator.

    Raises:
        RuntimeError: If the aggregator is not initialized.
    """
    if _aggregator is None:
        raise RuntimeError("OpenFinder aggregator not initialized. Is the server running?")
    return _aggregator


def set_upload_store(store: UploadStore | None) -> None:
    """Set the global upload store (called during app lifespan)."""
    global _upload_store
    _upload_store = store


def get_upload_store() -> UploadStore:
    """Get the global upload store.

    Raises:
        RuntimeError: If the store is not initialized.
    """
    if _upload_store is None:
        raise RuntimeError("OpenFinder upload store not initialized. Is the server running?")
    return _upload_store
