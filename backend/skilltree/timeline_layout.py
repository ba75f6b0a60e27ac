"""Timeline layout: x is earliest attainable time, lanes group medals by category."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .critical_path import schedule_earliest_finish
from .lane_assigner import assign_lanes
from .layout_models import Connection, LayoutBounds, LayoutMeta, LayoutOptions, LayoutResult
from .layout_registry import LayoutPreset
from .medals import Medal
from .prerequisite_graph import PrerequisiteEdge, build_prerequisite_graph

TIMELINE_LAYOUT_ID = "timeline"

TIMELINE_DEFAULT_OPTIONS = LayoutOptions(
    year_width=220,
    lane_height=260,
    row_height=70,
    radius=22,
)


def _wait_label(wait: float) -> Optional[str]:
    if wait <= 0:
        return None
    unit = "year" if wait == 1 else "years"
    return f"{wait:g} {unit}"


def _connections(edges: Sequence[PrerequisiteEdge]) -> List[Connection]:
    return [
        Connection(
            source=edge.source,
            target=edge.target,
            wait_years=edge.wait,
            label=_wait_label(edge.wait),
        )
        for edge in edges
    ]


def generate_timeline_layout(
    medals: Sequence[Medal],
    options: Optional[LayoutOptions] = None,
) -> LayoutResult:
    opts = TIMELINE_DEFAULT_OPTIONS.merged(options)
    medal_list = list(medals)

    graph = build_prerequisite_graph(medal_list)
    durations = {medal.id: medal.duration_years for medal in medal_list}
    schedule = schedule_earliest_finish(graph, durations)
    nodes, lanes = assign_lanes(
        medal_list,
        schedule.earliest_finish,
        graph,
        year_width=opts.year_width,
        lane_height=opts.lane_height,
        row_height=opts.row_height,
        radius=opts.radius,
    )

    return LayoutResult(
        nodes=nodes,
        connections=_connections(graph.edges),
        meta=LayoutMeta(
            kind=TIMELINE_LAYOUT_ID,
            lanes=lanes,
            year_width=opts.year_width,
            lane_height=opts.lane_height,
            row_height=opts.row_height,
            omitted_medal_ids=list(schedule.unresolved),
            bounds=LayoutBounds.around(nodes),
        ),
    )


timeline_preset = LayoutPreset(
    id=TIMELINE_LAYOUT_ID,
    label="Timeline",
    description="Lanes per category. X shows the minimum accumulated years across prerequisites.",
    generator=generate_timeline_layout,
    default_options=TIMELINE_DEFAULT_OPTIONS,
)


__all__ = [
    "TIMELINE_DEFAULT_OPTIONS",
    "TIMELINE_LAYOUT_ID",
    "generate_timeline_layout",
    "timeline_preset",
]
