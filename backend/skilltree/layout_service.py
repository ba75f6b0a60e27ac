"""Entry points that resolve a preset and run it with telemetry."""

from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

from .cache import layout_cache
from .layout_models import LayoutOptions, LayoutResult
from .layout_registry import LayoutRegistry
from .medal_catalog import MedalCatalog
from .medals import Medal
from .telemetry import emit_event

logger = logging.getLogger(__name__)


def compute_layout(
    registry: LayoutRegistry,
    medals: Sequence[Medal],
    *,
    preset_id: Optional[str] = None,
    options: Optional[LayoutOptions] = None,
) -> LayoutResult:
    """Run the preset named ``preset_id`` (or the default preset) over ``medals``."""
    preset = registry.get(preset_id)
    if preset is None:
        raise LookupError(f"Default layout preset '{registry.default_id}' is not registered.")
    if preset_id and preset.id != preset_id:
        logger.info("Unknown layout preset %s; falling back to %s", preset_id, preset.id)

    start = time.perf_counter()
    try:
        layout = preset.generate(medals, options)
    except Exception as exc:  # noqa: BLE001
        duration_ms = (time.perf_counter() - start) * 1000.0
        emit_event(
            "layout_generated",
            preset_id=preset.id,
            requested_preset_id=preset_id,
            status="error",
            duration_ms=round(duration_ms, 2),
            node_count=0,
            connection_count=0,
            omitted_count=0,
            error=str(exc),
            exception_type=exc.__class__.__name__,
        )
        logger.exception("Failed to generate %s layout", preset.id)
        raise
    duration_ms = (time.perf_counter() - start) * 1000.0

    emit_event(
        "layout_generated",
        preset_id=preset.id,
        requested_preset_id=preset_id,
        status="success",
        duration_ms=round(duration_ms, 2),
        node_count=len(layout.nodes),
        connection_count=len(layout.connections),
        omitted_count=len(layout.meta.omitted_medal_ids),
    )
    return layout


def compute_catalog_layout(
    registry: LayoutRegistry,
    catalog: MedalCatalog,
    *,
    preset_id: Optional[str] = None,
    options: Optional[LayoutOptions] = None,
) -> LayoutResult:
    """Layout for a whole catalog, served from the process cache when possible."""
    preset = registry.get(preset_id)
    if preset is None:
        raise LookupError(f"Default layout preset '{registry.default_id}' is not registered.")
    cached = layout_cache.get(catalog.fingerprint, preset.id, options)
    if cached is not None:
        return cached
    layout = compute_layout(registry, catalog.medals, preset_id=preset.id, options=options)
    layout_cache.set(catalog.fingerprint, preset.id, layout, options)
    return layout


__all__ = ["compute_catalog_layout", "compute_layout"]
