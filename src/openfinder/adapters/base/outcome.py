"""Adapter outcomes — Explicit result-or-error values returned by every adapter call.

An adapter call never raises into the aggregator. It returns exactly one of:

  - ``AdapterSuccess``: the provider answered; carries the normalized results
    (possibly empty).
  - ``AdapterSkipped``: the adapter deliberately did not run (e.g. no API key).
  - ``AdapterFailure``: the call failed (network, non-2xx, malformed body, ...).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from openfinder.models.result import NormalizedResult


class AdapterSuccess(BaseModel):
    """Provider answered successfully."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    provider: str = Field(description="Provider name")
    results: list[NormalizedResult] = Field(default_factory=list, description="Normalized results in provider order")
    took_ms: int = Field(default=0, description="Wall time of the provider call in ms")


class AdapterSkipped(BaseModel):
    """Adapter intentionally did not contact its provider."""

    model_config = ConfigDict(frozen=True)

    status: Literal["skipped"] = "skipped"
    provider: str = Field(description="Provider name")
    reason: str = Field(description="Why the adapter was skipped")


class AdapterFailure(BaseModel):
    """Provider call failed; the adapter contributes no results."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    provider: str = Field(description="Provider name")
    error: str = Field(description="Error message")
    error_type: str = Field(default="AdapterError", description="Exception class that caused the failure")


AdapterOutcome = AdapterSuccess | AdapterSkipped | AdapterFailure
