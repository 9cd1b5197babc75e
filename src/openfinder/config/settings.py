"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (OPENFINDER_ prefix)
  2. YAML config file (if specified)
  3. Default values

Provider API keys additionally fall back to the bare ``PIXABAY_API_KEY`` and
``UNSPLASH_API_KEY`` environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings

DEFAULT_ALLOWED_UPLOAD_TYPES: list[str] = [
    "application/pdf",
    "application/epub+zip",
    "image/jpeg",
    "image/png",
    "video/mp4",
    "application/zip",
    "text/plain",
]


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=1, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class ProviderSettings(BaseModel):
    """External content provider configuration.

    Every provider is queried with its own HTTP client; ``timeout_seconds``
    bounds each provider call so one slow catalog cannot stall a request.
    """

    timeout_seconds: float = Field(default=5.0, gt=0, description="Per-provider request timeout in seconds")
    user_agent: str = Field(default="OpenFinder/0.1", description="User-Agent sent to providers")
    pixabay_api_key: str | None = Field(default=None, description="Pixabay API key (skipped when unset)")
    unsplash_api_key: str | None = Field(default=None, description="Unsplash access key (skipped when unset)")
    enabled: dict[str, bool] = Field(
        default_factory=dict,
        description="Per-provider on/off switches keyed by provider name (default: all on)",
    )

    @model_validator(mode="after")
    def _fallback_to_bare_env_keys(self) -> ProviderSettings:
        """Pick up ``PIXABAY_API_KEY`` / ``UNSPLASH_API_KEY`` when no prefixed key is set."""
        if not self.pixabay_api_key:
            self.pixabay_api_key = os.environ.get("PIXABAY_API_KEY") or None
        if not self.unsplash_api_key:
            self.unsplash_api_key = os.environ.get("UNSPLASH_API_KEY") or None
        return self

    def is_enabled(self, provider: str) -> bool:
        return self.enabled.get(provider, True)


class UploadSettings(BaseModel):
    """File upload storage configuration."""

    directory: Path = Field(default=Path("public/uploads"), description="Directory uploaded files are written to")
    url_prefix: str = Field(default="/uploads", description="Public URL prefix for stored files")
    max_size_bytes: int = Field(default=100 * 1024 * 1024, gt=0, description="Maximum upload size in bytes")
    allowed_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_UPLOAD_TYPES),
        description="Accepted MIME types",
    )

    @field_validator("allowed_types", mode="before")
    @classmethod
    def _parse_allowed_types(cls, v: Any) -> list[str]:
        """Parse allowed types from a comma-separated string (env var) or list."""
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return list(v)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the OPENFINDER_ prefix.
    Nested settings use double underscores: OPENFINDER_SERVER__PORT=9090

    Example:
        OPENFINDER_SERVER__PORT=9090
        OPENFINDER_PROVIDERS__PIXABAY_API_KEY=...
        OPENFINDER_PROVIDERS__TIMEOUT_SECONDS=3
    """

    model_config = {
        "env_prefix": "OPENFINDER_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # Application metadata
    app_name: str = Field(default="OpenFinder", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    # Component settings
    server: ServerSettings = Field(default_factory=ServerSettings)
    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    uploads: UploadSettings = Field(default_factory=UploadSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
