"""Health endpoints — Service status and per-provider readiness.

``/health`` is cheap (no adapter calls) and flags providers that will be
skipped on every search because their API key is not configured.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from openfinder import __version__
from openfinder.adapters.base.adapter import AdapterHealth
from openfinder.api.deps import get_aggregator
from openfinder.core.aggregator import SearchAggregator

router = APIRouter()


class HealthResponse(BaseModel):
    status: str = Field(description="'healthy', or 'degraded' when some provider is skipped")
    version: str = Field(description="OpenFinder server version")
    service: str = Field(default="openfinder", description="Service name")
    active_adapters: list[str] = Field(description="Registered provider adapters, in precedence order")
    skipped_adapters: list[str] = Field(
        default_factory=list,
        description="Registered providers that are skipped because their API key is missing",
    )


class AdapterHealthResponse(BaseModel):
    adapters: dict[str, AdapterHealth] = Field(description="Provider name to readiness report")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service Health",
    description="Service version, registered providers and providers skipped for missing credentials.",
)
async def health_check(aggregator: SearchAggregator = Depends(get_aggregator)) -> HealthResponse:
    registry = aggregator.adapter_registry
    skipped = registry.missing_credentials
    return HealthResponse(
        status="degraded" if skipped else "healthy",
        version=__version__,
        active_adapters=registry.active_adapters,
        skipped_adapters=skipped,
    )


@router.get(
    "/health/adapters",
    response_model=AdapterHealthResponse,
    summary="Provider Readiness",
    description=(
        "Per-provider readiness. Credentialed providers without an API key are "
        "reported as `degraded`; uninitialized clients as `unhealthy`."
    ),
)
async def adapter_health(aggregator: SearchAggregator = Depends(get_aggregator)) -> AdapterHealthResponse:
    return AdapterHealthResponse(adapters=await aggregator.adapter_registry.health_check_all())
