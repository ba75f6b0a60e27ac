"""Pydantic models describing a computed layout."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class LayoutOptions(BaseModel):
    """Layout tuning knobs. Unset values fall back to the preset defaults."""

    model_config = ConfigDict(frozen=True)

    year_width: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    lane_height: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    row_height: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    radius: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)

    def merged(self, overrides: Optional["LayoutOptions"]) -> "LayoutOptions":
        if overrides is None:
            return self
        return self.model_copy(update=overrides.model_dump(exclude_none=True))


class LayoutPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class LayoutNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    medal_id: str
    category: str
    position: LayoutPosition
    radius: float
    earliest_finish: float
    max_incoming_wait: float = 0.0


class Connection(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    wait_years: float = 0.0
    kind: Literal["prerequisite"] = "prerequisite"
    label: Optional[str] = None


class LaneMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    y: float
    label: str


class LayoutBounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @classmethod
    def around(cls, nodes: List[LayoutNode]) -> "LayoutBounds":
        if not nodes:
            return cls()
        return cls(
            min_x=min(node.position.x - node.radius for node in nodes),
            min_y=min(node.position.y - node.radius for node in nodes),
            max_x=max(node.position.x + node.radius for node in nodes),
            max_y=max(node.position.y + node.radius for node in nodes),
        )


class LayoutMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    lanes: List[LaneMeta] = Field(default_factory=list)
    year_width: float
    lane_height: float
    row_height: float
    omitted_medal_ids: List[str] = Field(default_factory=list)
    bounds: LayoutBounds = Field(default_factory=LayoutBounds)


class LayoutResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    nodes: List[LayoutNode] = Field(default_factory=list)
    connections: List[Connection] = Field(default_factory=list)
    meta: LayoutMeta

    def node(self, medal_id: str) -> Optional[LayoutNode]:
        for node in self.nodes:
            if node.medal_id == medal_id:
                return node
        return None


__all__ = [
    "Connection",
    "LaneMeta",
    "LayoutBounds",
    "LayoutMeta",
    "LayoutNode",
    "LayoutOptions",
    "LayoutPosition",
    "LayoutResult",
]
