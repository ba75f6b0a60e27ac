"""Adjacency structures derived from medal prerequisite references."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .medals import Medal, positive_years

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrerequisiteEdge:
    source: str
    target: str
    wait: float


@dataclass
class PrerequisiteGraph:
    """Incoming/outgoing edge lists and in-degree counts keyed by medal id.

    Every medal id supplied to :func:`build_prerequisite_graph` is present in all
    three maps, even when it has no edges.
    """

    medal_ids: List[str]
    incoming: Dict[str, List[PrerequisiteEdge]]
    outgoing: Dict[str, List[str]]
    in_degree: Dict[str, int]
    edges: List[PrerequisiteEdge] = field(default_factory=list)
    dropped_references: int = 0

    def edges_from(self, medal_id: str) -> List[PrerequisiteEdge]:
        """Outgoing edges of ``medal_id`` in the order they were declared."""
        return self._edges_from.get(medal_id, [])

    def max_incoming_wait(self, medal_id: str) -> float:
        return max((edge.wait for edge in self.incoming.get(medal_id, [])), default=0.0)

    def __post_init__(self) -> None:
        self._edges_from: Dict[str, List[PrerequisiteEdge]] = {medal_id: [] for medal_id in self.medal_ids}
        for edge in self.edges:
            self._edges_from[edge.source].append(edge)


def build_prerequisite_graph(medals: Sequence[Medal]) -> PrerequisiteGraph:
    """Build the prerequisite graph for ``medals``.

    References to medal ids outside ``medals`` contribute no edge, which keeps the
    layout usable on filtered subsets of a larger catalog. Duplicate medal ids raise
    ``ValueError``.
    """
    medal_ids: List[str] = []
    seen = set()
    for medal in medals:
        if medal.id in seen:
            raise ValueError(f"Duplicate medal id '{medal.id}' in layout input.")
        seen.add(medal.id)
        medal_ids.append(medal.id)

    incoming: Dict[str, List[PrerequisiteEdge]] = {medal_id: [] for medal_id in medal_ids}
    outgoing: Dict[str, List[str]] = {medal_id: [] for medal_id in medal_ids}
    in_degree: Dict[str, int] = {medal_id: 0 for medal_id in medal_ids}
    edges: List[PrerequisiteEdge] = []
    dropped = 0

    for medal in medals:
        for prerequisite in medal.prerequisites:
            if not prerequisite.is_medal_reference:
                continue
            source = prerequisite.medal_id
            if source not in seen:
                dropped += 1
                logger.debug(
                    "Medal %s references missing prerequisite %s; ignoring.",
                    medal.id,
                    source,
                )
                continue
            edge = PrerequisiteEdge(
                source=source,
                target=medal.id,
                wait=positive_years(prerequisite.wait_years),
            )
            incoming[medal.id].append(edge)
            outgoing[source].append(medal.id)
            in_degree[medal.id] += 1
            edges.append(edge)

    return PrerequisiteGraph(
        medal_ids=medal_ids,
        incoming=incoming,
        outgoing=outgoing,
        in_degree=in_degree,
        edges=edges,
        dropped_references=dropped,
    )


__all__ = ["PrerequisiteEdge", "PrerequisiteGraph", "build_prerequisite_graph"]
