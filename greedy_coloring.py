"""
Greedy (first-fit) vertex coloring.

Vertices are colored in their sequence order; each one takes the smallest
color not already used by a colored neighbour. This gives an upper bound on the
chromatic number, not the minimum.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from graph_model import GraphModel, adjacency_lists

logger = logging.getLogger(__name__)


class InvalidOperationError(Exception):
    def __init__(self, message):
        super().__init__(message)


class EmptyGraphError(InvalidOperationError):
    def __init__(self, message="Cannot color an empty graph. Add vertices and edges."):
        super().__init__(message)


@dataclass(frozen=True)
class ColoringResult:
    graph: GraphModel
    color_count: int


@dataclass(frozen=True)
class ColoringStep:
    """One replay frame: the full graph after coloring ``vertex_id``.

    The first frame has ``vertex_id`` and ``color`` set to None.
    """

    index: int
    graph: GraphModel
    vertex_id: Optional[int] = None
    color: Optional[int] = None


def smallest_free_color(neighbor_colors: Iterable[Optional[int]]) -> int:
    used = {c for c in neighbor_colors if c is not None}
    c = 0
    while c in used:
        c += 1
    return c


def _check_not_empty(graph: GraphModel) -> None:
    if graph.is_empty:
        raise EmptyGraphError()


def color_all(graph: GraphModel) -> ColoringResult:
    _check_not_empty(graph)
    if graph.n_edges == 0:
        colored = graph.with_colors({v.id: 0 for v in graph.vertices})
        logger.debug("no edges; %d vertices get color 0", graph.n_vertices)
        return ColoringResult(colored, 1)

    adj = adjacency_lists(graph)
    colors: Dict[int, Optional[int]] = {v.id: None for v in graph.vertices}
    for v in graph.vertices:
        colors[v.id] = smallest_free_color(colors[u] for u in adj[v.id])

    k = max(colors.values()) + 1
    logger.debug("greedy coloring of %d vertices used %d colors", graph.n_vertices, k)
    return ColoringResult(graph.with_colors(colors), k)


def color_step_by_step(graph: GraphModel) -> List[ColoringStep]:
    _check_not_empty(graph)
    adj = adjacency_lists(graph)
    current = graph.reset_colors()
    colors: Dict[int, Optional[int]] = {v.id: None for v in graph.vertices}
    steps = [ColoringStep(0, current)]
    for i, v in enumerate(graph.vertices, start=1):
        c = smallest_free_color(colors[u] for u in adj[v.id])
        colors[v.id] = c
        current = current.with_colors({v.id: c})
        steps.append(ColoringStep(i, current, v.id, c))
    logger.debug("built %d coloring steps", len(steps))
    return steps
