"""Configuration — application settings."""

from openfinder.config.settings import Settings

__all__ = ["Settings"]
