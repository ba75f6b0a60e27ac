"""Simple in-memory cache for computed catalog layouts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from ..layout_models import LayoutOptions, LayoutResult

CacheKey = Tuple[str, str, Tuple[Tuple[str, float], ...]]


def _cache_key(fingerprint: str, preset_id: str, options: Optional[LayoutOptions]) -> CacheKey:
    normalized = fingerprint.strip()
    if not normalized:
        raise ValueError("Catalog fingerprint cannot be empty when caching layouts.")
    overrides = options.model_dump(exclude_none=True) if options is not None else {}
    return normalized, preset_id, tuple(sorted(overrides.items()))


@dataclass
class _LayoutEntry:
    layout: LayoutResult
    cached_at: datetime


class LayoutCache:
    """Process-local cache of full layout results."""

    def __init__(self) -> None:
        self._entries: Dict[CacheKey, _LayoutEntry] = {}

    def get(
        self,
        fingerprint: str,
        preset_id: str,
        options: Optional[LayoutOptions] = None,
    ) -> Optional[LayoutResult]:
        entry = self._entries.get(_cache_key(fingerprint, preset_id, options))
        if entry is None:
            return None
        return entry.layout.model_copy(deep=True)

    def set(
        self,
        fingerprint: str,
        preset_id: str,
        layout: LayoutResult,
        options: Optional[LayoutOptions] = None,
    ) -> None:
        key = _cache_key(fingerprint, preset_id, options)
        self._entries[key] = _LayoutEntry(
            layout=layout.model_copy(deep=True),
            cached_at=datetime.now(timezone.utc),
        )

    def invalidate(self, fingerprint: str) -> None:
        normalized = fingerprint.strip()
        for key in [key for key in self._entries if key[0] == normalized]:
            self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


layout_cache = LayoutCache()

__all__ = ["LayoutCache", "layout_cache"]
