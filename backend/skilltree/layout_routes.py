"""REST endpoints exposing the layout presets to rendering clients."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from pydantic import BaseModel, Field

from .cache import layout_cache
from .config import Settings, get_settings
from .layout_models import LayoutOptions, LayoutResult
from .layout_registry import LayoutPresetSummary, LayoutRegistry
from .layout_service import compute_catalog_layout, compute_layout
from .medal_catalog import get_catalog
from .medals import Medal


router = APIRouter(prefix="/api/layouts", tags=["layouts"])
logger = logging.getLogger(__name__)


class LayoutRequest(BaseModel):
    preset_id: Optional[str] = Field(default=None, max_length=64)
    medals: List[Medal] = Field(default_factory=list)
    options: Optional[LayoutOptions] = None


def get_layout_registry(request: Request) -> LayoutRegistry:
    return request.app.state.layout_registry


@router.get("", response_model=List[LayoutPresetSummary])
def list_layouts(registry: LayoutRegistry = Depends(get_layout_registry)) -> List[LayoutPresetSummary]:
    return registry.list()


@router.post("/generate", response_model=LayoutResult, status_code=status.HTTP_200_OK)
def generate_layout(
    payload: LayoutRequest,
    registry: LayoutRegistry = Depends(get_layout_registry),
) -> LayoutResult:
    try:
        return compute_layout(
            registry,
            payload.medals,
            preset_id=payload.preset_id,
            options=payload.options,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.get("/catalog", response_model=LayoutResult)
def catalog_layout(
    preset_id: Optional[str] = Query(default=None, max_length=64),
    registry: LayoutRegistry = Depends(get_layout_registry),
) -> LayoutResult:
    try:
        catalog = get_catalog()
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        logger.error("Configured medal catalog is invalid: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Configured medal catalog is invalid: {exc}",
        ) from exc
    try:
        return compute_catalog_layout(registry, catalog, preset_id=preset_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
def clear_layout_cache(settings: Settings = Depends(get_settings)) -> Response:
    if not settings.debug_endpoints:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    cleared = len(layout_cache)
    layout_cache.clear()
    logger.info("Cleared %d cached layout(s)", cleared)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
