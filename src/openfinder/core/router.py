"""Type router — Maps a content-type filter to the providers worth asking.

The order of providers in a route is the precedence order used to
concatenate results, so it must stay fixed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from openfinder.adapters.base.adapter import Provider, QueryContext
from openfinder.models.result import TypeFilter

_ROUTES: dict[TypeFilter, tuple[Provider, ...]] = {
    TypeFilter.ALL: (
        Provider.OPENLIBRARY,
        Provider.GUTENBERG,
        Provider.PIXABAY,
        Provider.UNSPLASH,
        Provider.INTERNET_ARCHIVE,
    ),
    TypeFilter.BOOK: (Provider.OPENLIBRARY, Provider.GUTENBERG, Provider.INTERNET_ARCHIVE),
    TypeFilter.PDF: (Provider.OPENLIBRARY, Provider.GUTENBERG, Provider.INTERNET_ARCHIVE),
    TypeFilter.VIDEO: (Provider.INTERNET_ARCHIVE,),
    TypeFilter.IMAGE: (Provider.PIXABAY, Provider.UNSPLASH),
    TypeFilter.DATASET: (Provider.INTERNET_ARCHIVE,),
}

# Internet Archive mediatype clause per filter; ALL and IMAGE search unfiltered.
_ARCHIVE_MEDIA_TYPES: dict[TypeFilter, str] = {
    TypeFilter.VIDEO: "movies",
    TypeFilter.BOOK: "texts",
    TypeFilter.PDF: "texts",
    TypeFilter.DATASET: "data",
}


class RoutePlan(BaseModel):
    """Providers to invoke for one request, in precedence order."""

    model_config = ConfigDict(frozen=True)

    type_filter: TypeFilter = Field(description="Resolved content-type filter")
    providers: tuple[Provider, ...] = Field(description="Providers to invoke, in precedence order")
    archive_media_type: str | None = Field(default=None, description="Internet Archive mediatype sub-filter")

    @property
    def context(self) -> QueryContext:
        return QueryContext(type_filter=self.type_filter, archive_media_type=self.archive_media_type)


def route(type_filter: TypeFilter | str | None) -> RoutePlan:
    """Build the route plan for a caller-supplied filter.

    Unknown or missing filters are treated as ``all``; routing never fails.
    """
    resolved = TypeFilter.parse(type_filter)
    return RoutePlan(
        type_filter=resolved,
        providers=_ROUTES[resolved],
        archive_media_type=_ARCHIVE_MEDIA_TYPES.get(resolved),
    )
