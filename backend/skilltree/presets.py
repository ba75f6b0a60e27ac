"""Built-in layout presets."""

from __future__ import annotations

from typing import Optional

from .layout_registry import DEFAULT_LAYOUT_ID, LayoutRegistry
from .timeline_layout import timeline_preset

BUILTIN_PRESETS = (timeline_preset,)


def create_layout_registry(default_id: Optional[str] = None) -> LayoutRegistry:
    """Build a registry with every built-in preset registered."""
    registry = LayoutRegistry(default_id=default_id or DEFAULT_LAYOUT_ID)
    for preset in BUILTIN_PRESETS:
        registry.register(preset)
    return registry


__all__ = ["BUILTIN_PRESETS", "create_layout_registry"]
