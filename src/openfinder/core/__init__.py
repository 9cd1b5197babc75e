"""Core search logic — type routing and multi-provider aggregation."""

from openfinder.core.aggregator import SearchAggregator
from openfinder.core.router import RoutePlan, route

__all__ = ["RoutePlan", "SearchAggregator", "route"]
