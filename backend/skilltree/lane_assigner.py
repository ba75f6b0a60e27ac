"""Turns earliest-finish times into lane-based 2D positions."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Mapping, Sequence, Tuple

from .layout_models import LaneMeta, LayoutNode, LayoutPosition
from .medals import Medal
from .prerequisite_graph import PrerequisiteGraph


def _lane_labels(medals: Sequence[Medal]) -> Dict[str, str]:
    labels: Dict[str, str] = {}
    for medal in medals:
        if medal.lane_key in labels:
            continue
        label = (medal.category_label or "").strip()
        labels[medal.lane_key] = label or medal.lane_key
    return labels


def assign_lanes(
    medals: Sequence[Medal],
    earliest_finish: Mapping[str, float],
    graph: PrerequisiteGraph,
    *,
    year_width: float,
    lane_height: float,
    row_height: float,
    radius: float,
) -> Tuple[List[LayoutNode], List[LaneMeta]]:
    """Place every scheduled medal in its category lane.

    Lanes are ordered by category name. Inside a lane, medals sharing the same
    earliest finish form a time-bucket and are stacked ``row_height`` apart in id
    order so they never overlap. Medals missing from ``earliest_finish`` are skipped.
    """
    scheduled = [medal for medal in medals if medal.id in earliest_finish]
    labels = _lane_labels(scheduled)
    categories = sorted(labels)

    by_lane: Dict[str, Dict[float, List[Medal]]] = defaultdict(lambda: defaultdict(list))
    for medal in scheduled:
        by_lane[medal.lane_key][earliest_finish[medal.id]].append(medal)

    nodes: List[LayoutNode] = []
    lanes: List[LaneMeta] = []
    for lane_index, category in enumerate(categories):
        lane_y = lane_index * lane_height
        lanes.append(LaneMeta(category=category, y=lane_y, label=labels[category]))
        buckets = by_lane[category]
        for finish in sorted(buckets):
            bucket = sorted(buckets[finish], key=lambda medal: medal.id)
            for slot, medal in enumerate(bucket):
                nodes.append(
                    LayoutNode(
                        medal_id=medal.id,
                        category=category,
                        position=LayoutPosition(x=finish * year_width, y=lane_y + slot * row_height),
                        radius=radius,
                        earliest_finish=finish,
                        max_incoming_wait=graph.max_incoming_wait(medal.id),
                    )
                )
    return nodes, lanes


__all__ = ["assign_lanes"]
