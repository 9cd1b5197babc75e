"""Base provider adapter — Abstract interface for all content catalog connectors.

Every external catalog must implement this interface to take part in an
aggregated search. The adapter is responsible for:
  1. Building exactly one outbound HTTP GET for a query
  2. Decoding the provider-specific JSON into a typed response schema
  3. Projecting each returned item into zero or one ``NormalizedResult``
  4. Converting every failure into an explicit ``AdapterOutcome``
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel, Field, ValidationError

from openfinder.adapters.base.exceptions import (
    AdapterError,
    ConnectionError,
    QueryError,
    ResponseFormatError,
)
from openfinder.adapters.base.outcome import AdapterFailure, AdapterOutcome, AdapterSkipped, AdapterSuccess
from openfinder.models.result import NormalizedResult, TypeFilter

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)
ItemT = TypeVar("ItemT", bound=BaseModel)


class Provider(str, Enum):
    """Known content providers, keyed by adapter name."""

    OPENLIBRARY = "openlibrary"
    GUTENBERG = "gutenberg"
    PIXABAY = "pixabay"
    UNSPLASH = "unsplash"
    INTERNET_ARCHIVE = "internet_archive"


class QueryContext(BaseModel):
    """Routing information passed along with the query.

    Only multi-type catalogs (the Internet Archive) look at it.
    """

    type_filter: TypeFilter = Field(default=TypeFilter.ALL, description="Caller's original content-type filter")
    archive_media_type: str | None = Field(default=None, description="Archive mediatype sub-filter, if any")


class ProviderRequest(BaseModel):
    """A fully specified outbound GET request."""

    url: str
    params: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)


class AdapterHealth(BaseModel):
    """Health status of a provider adapter."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class ProviderAdapter(ABC, Generic[ResponseT]):
    """Abstract base class for provider adapters.

    Subclasses declare their identity as class attributes and implement:
      - build_request(): the provider's search URL, params and headers
      - normalize(): typed response -> list of NormalizedResult

    ``search()`` is the only entry point the aggregator uses; it never raises.

    Args:
        api_key: Provider credential (only used by credentialed providers).
        timeout: HTTP timeout in seconds for the provider call.
        user_agent: User-Agent header sent with every request.
        **kwargs: Extra keyword arguments (ignored, for config compat).
    """

    provider: ClassVar[Provider]
    source_name: ClassVar[str]
    id_prefix: ClassVar[str]
    max_items: ClassVar[int]
    response_model: ClassVar[type[BaseModel]]
    requires_credential: ClassVar[bool] = False

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = 5.0,
        user_agent: str = "OpenFinder/0.1",
        **kwargs: Any,
    ) -> None:
        self._api_key = api_key or None
        self._timeout = timeout
        self._user_agent = user_agent
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return self.provider.value

    @property
    def has_credential(self) -> bool:
        return not self.requires_credential or bool(self._api_key)

    async def initialize(self) -> None:
        """Create the HTTP client used for provider calls."""
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self._user_agent, "Accept": "application/json"},
            timeout=self._timeout,
            follow_redirects=True,
        )
        logger.info("%s adapter initialized (timeout=%.1fs)", self.source_name, self._timeout)

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Provider-specific hooks ──────────────────────────────────────────

    @abstractmethod
    def build_request(self, query: str, context: QueryContext) -> ProviderRequest:
        """Build the single outbound search request for *query*."""

    @abstractmethod
    def normalize(self, response: ResponseT, context: QueryContext) -> list[NormalizedResult]:
        """Project a decoded provider response into normalized results.

        Implementations return results in the provider's native order and
        skip items that cannot be represented.
        """

    # ── Shared pipeline ──────────────────────────────────────────────────

    def parse_response(self, payload: Any, context: QueryContext) -> list[NormalizedResult]:
        """Decode a raw JSON payload and normalize it, capped at ``max_items``.

        Raises:
            ResponseFormatError: If the response envelope does not match the provider schema.
                Individual items are checked later by ``decode_items``.
        """
        try:
            decoded = self.response_model.model_validate(payload)
        except ValidationError as e:
            raise ResponseFormatError(f"{self.source_name} returned an unexpected payload: {e}") from e
        return self.normalize(decoded, context)[: self.max_items]  # type: ignore[arg-type]

    def decode_items(self, items: list[Any], item_model: type[ItemT]) -> list[ItemT]:
        """Validate provider items one by one, dropping the ones that do not fit *item_model*.

        Skipped items are logged at debug level.
        """
        decoded: list[ItemT] = []
        for index, item in enumerate(items):
            try:
                decoded.append(item_model.model_validate(item))
            except ValidationError as e:
                logger.debug("%s: dropping malformed item #%d (%d errors)", self.source_name, index, e.error_count())
        return decoded

    async def fetch(self, request: ProviderRequest) -> Any:
        """Send *request* and return the decoded JSON body.

        Raises:
            ConnectionError: On network errors and timeouts.
            QueryError: On non-2xx responses.
            ResponseFormatError: When the body is not valid JSON.
        """
        if self._client is None:
            raise ConnectionError(f"{self.source_name} client not initialized.")

        try:
            response = await self._client.get(request.url, params=request.params, headers=request.headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise QueryError(f"{self.source_name} API error ({e.response.status_code})") from e
        except httpx.RequestError as e:
            raise ConnectionError(f"{self.source_name} request failed: {e!r}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ResponseFormatError(f"{self.source_name} returned malformed JSON") from e

    async def search(self, query: str, context: QueryContext | None = None) -> AdapterOutcome:
        """Search the provider and return an explicit outcome.

        Args:
            query: The search query string (non-empty).
            context: Routing context from the type router.

        Returns:
            ``AdapterSkipped`` when a required credential is missing (no network
            call is made), ``AdapterSuccess`` with normalized results, or
            ``AdapterFailure`` for any error while calling or decoding.
        """
        context = context or QueryContext()
        if not self.has_credential:
            return AdapterSkipped(
                provider=self.name,
                reason=f"{self.source_name} API key not set",
            )

        start = time.monotonic()
        try:
            payload = await self.fetch(self.build_request(query, context))
            results = self.parse_response(payload, context)
        except AdapterError as e:
            return AdapterFailure(provider=self.name, error=str(e), error_type=type(e).__name__)
        except Exception as e:
            # normalization bugs are contained to this provider
            logger.debug("%s normalization failed", self.source_name, exc_info=True)
            return AdapterFailure(provider=self.name, error=str(e), error_type=type(e).__name__)

        took_ms = int((time.monotonic() - start) * 1000)
        logger.debug(
            "%s search: query=%s, results=%d, took=%dms",
            self.source_name,
            query,
            len(results),
            took_ms,
        )
        return AdapterSuccess(provider=self.name, results=results, took_ms=took_ms)

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> AdapterHealth:
        """Report whether the adapter is ready to serve searches.

        No probe request is sent; provider quotas are not spent on health checks.
        """
        now = datetime.now(UTC).isoformat()
        if self._client is None:
            return AdapterHealth(status="unhealthy", last_check=now, message=f"{self.source_name} client not initialized")
        if not self.has_credential:
            return AdapterHealth(status="degraded", last_check=now, message=f"{self.source_name} API key not set")
        return AdapterHealth(status="healthy", last_check=now, message=f"{self.source_name} OK")
