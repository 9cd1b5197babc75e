"""Unsplash adapter."""

from openfinder.adapters.unsplash.adapter import UnsplashAdapter

__all__ = ["UnsplashAdapter"]
