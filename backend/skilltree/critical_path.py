"""Earliest-finish scheduling over the medal prerequisite graph."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Mapping

from .prerequisite_graph import PrerequisiteGraph

logger = logging.getLogger(__name__)


@dataclass
class CriticalPathSchedule:
    earliest_start: Dict[str, float] = field(default_factory=dict)
    earliest_finish: Dict[str, float] = field(default_factory=dict)
    order: List[str] = field(default_factory=list)
    unresolved: List[str] = field(default_factory=list)

    def is_complete(self) -> bool:
        return not self.unresolved


def schedule_earliest_finish(
    graph: PrerequisiteGraph,
    durations: Mapping[str, float],
) -> CriticalPathSchedule:
    """Compute the earliest finish time of every medal reachable in topological order.

    A medal cannot start before ``finish(prerequisite) + wait`` for each of its
    incoming edges; the largest of those candidates is its start, and its finish
    adds its own duration. Roots start at 0. Medals inside a cycle, or downstream of
    one, never reach zero pending in-degree and are reported in ``unresolved``.
    Nodes are processed first in, first out so identical input yields identical order.
    """
    pending = dict(graph.in_degree)
    schedule = CriticalPathSchedule()
    accumulated_start: Dict[str, float] = {medal_id: 0.0 for medal_id in graph.medal_ids}

    queue: Deque[str] = deque()
    for medal_id in graph.medal_ids:
        if pending[medal_id] == 0:
            schedule.earliest_start[medal_id] = 0.0
            schedule.earliest_finish[medal_id] = durations.get(medal_id, 0.0)
            queue.append(medal_id)

    while queue:
        medal_id = queue.popleft()
        schedule.order.append(medal_id)
        finish = schedule.earliest_finish[medal_id]
        for edge in graph.edges_from(medal_id):
            target = edge.target
            candidate = finish + edge.wait
            if candidate > accumulated_start[target]:
                accumulated_start[target] = candidate
            pending[target] -= 1
            if pending[target] == 0:
                start = accumulated_start[target]
                schedule.earliest_start[target] = start
                schedule.earliest_finish[target] = start + durations.get(target, 0.0)
                queue.append(target)

    schedule.unresolved = [medal_id for medal_id in graph.medal_ids if medal_id not in schedule.earliest_finish]
    if schedule.unresolved:
        logger.warning(
            "Detected prerequisite cycle involving %s; omitting %d medal(s) from the layout.",
            ", ".join(schedule.unresolved),
            len(schedule.unresolved),
        )
    return schedule


__all__ = ["CriticalPathSchedule", "schedule_earliest_finish"]
