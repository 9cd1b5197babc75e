"""Project Gutenberg adapter."""

from openfinder.adapters.gutenberg.adapter import GutenbergAdapter

__all__ = ["GutenbergAdapter"]
