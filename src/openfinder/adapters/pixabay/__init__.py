"""Pixabay adapter."""

from openfinder.adapters.pixabay.adapter import PixabayAdapter

__all__ = ["PixabayAdapter"]
