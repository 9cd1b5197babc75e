"""Internet Archive adapter."""

from openfinder.adapters.internet_archive.adapter import InternetArchiveAdapter

__all__ = ["InternetArchiveAdapter"]
