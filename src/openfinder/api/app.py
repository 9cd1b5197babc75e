"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import importlib
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from openfinder import __version__
from openfinder.adapters.base.adapter import Provider
from openfinder.api.deps import set_aggregator, set_upload_store
from openfinder.api.router import router as api_router
from openfinder.config.settings import Settings
from openfinder.core.aggregator import SearchAggregator
from openfinder.observability.logging import setup_logging
from openfinder.storage.uploads import UploadStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        # Auto-detect openfinder-config.yaml if present
        yaml_path = Path("openfinder-config.yaml")
        if yaml_path.exists():
            logger.info("Loading configuration from %s", yaml_path)
            settings = Settings.from_yaml(yaml_path)
        else:
            settings = Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        setup_logging(settings.observability)
        logger.info("Starting OpenFinder v%s", __version__)

        aggregator = SearchAggregator(settings)
        _register_adapters(aggregator, settings)
        await aggregator.initialize()

        set_aggregator(aggregator)
        set_upload_store(UploadStore(settings.uploads))

        app.state.settings = settings
        app.state.aggregator = aggregator

        logger.info("OpenFinder is ready to serve requests on port %d", settings.server.port)
        yield

        logger.info("Shutting down OpenFinder...")
        await aggregator.shutdown()
        set_aggregator(None)
        set_upload_store(None)
        logger.info("OpenFinder shutdown complete")

    app = FastAPI(
        title="OpenFinder",
        description=(
            "Open-content search aggregator — one query across book catalogs, "
            "public-domain texts, stock photo services and the Internet Archive."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    # Stored uploads are served as static files
    settings.uploads.directory.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.uploads.url_prefix,
        StaticFiles(directory=str(settings.uploads.directory)),
        name="uploads",
    )

    return app


# ── Adapter auto-registration ──

# Maps providers to (module_path, class_name) for lazy import, in precedence order
_ADAPTER_MAP: dict[Provider, tuple[str, str]] = {
    Provider.OPENLIBRARY: ("openfinder.adapters.openlibrary.adapter", "OpenLibraryAdapter"),
    Provider.GUTENBERG: ("openfinder.adapters.gutenberg.adapter", "GutenbergAdapter"),
    Provider.PIXABAY: ("openfinder.adapters.pixabay.adapter", "PixabayAdapter"),
    Provider.UNSPLASH: ("openfinder.adapters.unsplash.adapter", "UnsplashAdapter"),
    Provider.INTERNET_ARCHIVE: ("openfinder.adapters.internet_archive.adapter", "InternetArchiveAdapter"),
}


def _register_adapters(aggregator: SearchAggregator, settings: Settings) -> None:
    """Instantiate and register every enabled provider adapter.

    Adapters are initialised afterwards by ``SearchAggregator.initialize()``.
    """
    providers = settings.providers
    api_keys = {
        Provider.PIXABAY: providers.pixabay_api_key,
        Provider.UNSPLASH: providers.unsplash_api_key,
    }

    for provider, (module_path, class_name) in _ADAPTER_MAP.items():
        if not providers.is_enabled(provider.value):
            logger.info("Adapter '%s' is disabled, skipping", provider.value)
            continue

        module = importlib.import_module(module_path)
        adapter_class = getattr(module, class_name)
        adapter = adapter_class(
            api_key=api_keys.get(provider),
            timeout=providers.timeout_seconds,
            user_agent=providers.user_agent,
        )
        if adapter.requires_credential and not adapter.has_credential:
            logger.warning("%s API key not set, %s searches will be skipped", adapter.source_name, provider.value)
        aggregator.adapter_registry.register(adapter)
