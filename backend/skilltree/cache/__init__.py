"""In-memory caches shared across backend services."""

from .layout_cache import layout_cache, LayoutCache

__all__ = ["layout_cache", "LayoutCache"]
