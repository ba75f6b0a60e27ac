"""Catalog of named layout algorithms."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel

from .layout_models import LayoutOptions, LayoutResult
from .medals import Medal

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_ID = "timeline"

LayoutGenerator = Callable[[Sequence[Medal], LayoutOptions], LayoutResult]


class LayoutConfigurationError(RuntimeError):
    """Raised when a preset definition is malformed or registered twice."""


@dataclass(frozen=True)
class LayoutPreset:
    id: str
    label: str
    generator: LayoutGenerator
    description: str = ""
    default_options: LayoutOptions = field(default_factory=LayoutOptions)

    def generate(self, medals: Sequence[Medal], options: Optional[LayoutOptions] = None) -> LayoutResult:
        return self.generator(medals, self.default_options.merged(options))


class LayoutPresetSummary(BaseModel):
    id: str
    label: str
    description: str = ""


class LayoutRegistry:
    """Write-once-per-id registry of layout presets.

    Registration is expected during startup only; lookups fall back to the
    designated default preset when the requested id is unknown.
    """

    def __init__(self, default_id: str = DEFAULT_LAYOUT_ID) -> None:
        self._default_id = default_id
        self._presets: Dict[str, LayoutPreset] = {}

    @property
    def default_id(self) -> str:
        return self._default_id

    def register(self, preset: LayoutPreset) -> LayoutPreset:
        if not isinstance(preset, LayoutPreset):
            raise LayoutConfigurationError("Layout preset must be a LayoutPreset instance.")
        if not isinstance(preset.id, str) or not preset.id.strip():
            raise LayoutConfigurationError("Layout preset id must be a non-empty string.")
        if not callable(preset.generator):
            raise LayoutConfigurationError(f"Layout preset '{preset.id}' generator must be callable.")
        if preset.id in self._presets:
            raise LayoutConfigurationError(f"Layout preset id already registered: {preset.id}")
        self._presets[preset.id] = preset
        logger.debug("Registered layout preset %s", preset.id)
        return preset

    def get(self, preset_id: Optional[str] = None) -> Optional[LayoutPreset]:
        if preset_id and preset_id in self._presets:
            return self._presets[preset_id]
        return self._presets.get(self._default_id)

    def list(self) -> List[LayoutPresetSummary]:
        return [
            LayoutPresetSummary(id=preset.id, label=preset.label, description=preset.description or "")
            for preset in self._presets.values()
        ]

    def __contains__(self, preset_id: object) -> bool:
        return preset_id in self._presets

    def __len__(self) -> int:
        return len(self._presets)


__all__ = [
    "DEFAULT_LAYOUT_ID",
    "LayoutConfigurationError",
    "LayoutGenerator",
    "LayoutPreset",
    "LayoutPresetSummary",
    "LayoutRegistry",
]
