"""Data models shared across adapters, the aggregator, and the API."""

from openfinder.models.response import SearchResponse
from openfinder.models.result import ContentType, NormalizedResult, TypeFilter

__all__ = ["ContentType", "NormalizedResult", "SearchResponse", "TypeFilter"]
