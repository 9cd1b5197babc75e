"""Normalized result model — The single schema every provider adapter emits.

Providers return wildly different JSON shapes; adapters project each item into
``NormalizedResult`` so the aggregator can concatenate them without knowing
where they came from. Field names are snake_case in Python and camelCase on
the wire (``contentType``, ``sourceName``, ...).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    """Content classification of a normalized result."""

    BOOK = "book"
    VIDEO = "video"
    IMAGE = "image"
    PDF = "pdf"
    DATASET = "dataset"


class TypeFilter(str, Enum):
    """Content-type filter requested by the caller (a routing key only)."""

    ALL = "all"
    BOOK = "book"
    VIDEO = "video"
    IMAGE = "image"
    PDF = "pdf"
    DATASET = "dataset"

    @classmethod
    def parse(cls, value: str | TypeFilter | None) -> TypeFilter:
        """Resolve a raw filter value, degrading to ``ALL`` when absent or unknown."""
        if isinstance(value, TypeFilter):
            return value
        if not value:
            return cls.ALL
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


class NormalizedResult(BaseModel):
    """A single search hit, normalized across providers.

    ``id`` is globally unique within one response because every adapter
    prefixes the provider's native identifier with its own tag
    (``"ol-OL123W"``, ``"ia-some_item"``, ...). ``source_url`` always links to
    the provider's page, never to a local copy.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Provider-prefixed identifier, e.g. 'pg-84'")
    title: str = Field(min_length=1, description="Display title (provider default when missing upstream)")
    content_type: ContentType = Field(alias="contentType", description="Normalized content type")
    source_name: str = Field(alias="sourceName", description="Human-readable provider label")
    source_url: str = Field(alias="sourceUrl", description="Canonical link to the original content page")
    preview_url: str | None = Field(default=None, alias="previewUrl", description="Thumbnail or cover image URL")
    description: str | None = Field(default=None, description="Short provider-specific description")
    author: str | None = Field(default=None, description="Primary credited author or creator")
