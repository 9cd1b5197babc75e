"""OpenLibrary adapter."""

from openfinder.adapters.openlibrary.adapter import OpenLibraryAdapter

__all__ = ["OpenLibraryAdapter"]
