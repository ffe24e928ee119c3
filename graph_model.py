"""
Graph model for the coloring simulator.

A graph is an immutable snapshot: an ordered tuple of vertices (the order is the
coloring order) and a tuple of undirected edges. Every editing operation returns
a new snapshot, so step-replay history can hold on to old ones safely.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


# ---------------------------- Vertices / Edges ---------------------------- #


@dataclass(frozen=True)
class Vertex:
    id: int
    x: float
    y: float
    color: Optional[int] = None


@dataclass(frozen=True)
class Edge:
    source: int
    target: int

    def key(self) -> Tuple[int, int]:
        # undirected: (a, b) and (b, a) share a key
        return (min(self.source, self.target), max(self.source, self.target))

    def touches(self, vid: int) -> bool:
        return vid == self.source or vid == self.target


# ---------------------------- Graph Model ---------------------------- #


@dataclass(frozen=True)
class GraphModel:
    vertices: Tuple[Vertex, ...] = ()
    edges: Tuple[Edge, ...] = ()

    # ---- queries ---- #
    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    @property
    def is_empty(self) -> bool:
        return not self.vertices

    def ids(self) -> List[int]:
        return [v.id for v in self.vertices]

    def index_of(self, vid: int) -> Optional[int]:
        for i, v in enumerate(self.vertices):
            if v.id == vid:
                return i
        return None

    def vertex(self, vid: int) -> Optional[Vertex]:
        i = self.index_of(vid)
        return None if i is None else self.vertices[i]

    def has_vertex(self, vid: int) -> bool:
        return self.index_of(vid) is not None

    def has_edge(self, a: int, b: int) -> bool:
        key = (min(a, b), max(a, b))
        return any(e.key() == key for e in self.edges)

    def next_id(self) -> int:
        if not self.vertices:
            return 0
        return max(v.id for v in self.vertices) + 1

    def colors(self) -> Dict[int, Optional[int]]:
        return {v.id: v.color for v in self.vertices}

    def positions(self) -> np.ndarray:
        if not self.vertices:
            return np.zeros((0, 2), dtype=float)
        return np.array([[v.x, v.y] for v in self.vertices], dtype=float)

    def color_count(self) -> int:
        """Number of colors in use, ``1 + max(color)``; 0 when nothing is colored."""
        used = [v.color for v in self.vertices if v.color is not None]
        return max(used) + 1 if used else 0

    def is_properly_colored(self) -> bool:
        """True when every vertex has a color and no edge joins two equal colors."""
        colors = self.colors()
        if any(c is None for c in colors.values()):
            return False
        return all(colors[e.source] != colors[e.target] for e in self.edges)

    # ---- copy-on-write ops ---- #
    def add_vertex(self, x: float, y: float) -> "GraphModel":
        v = Vertex(self.next_id(), float(x), float(y))
        return replace(self, vertices=self.vertices + (v,))

    def add_edge(self, a: int, b: int) -> "GraphModel":
        if a == b:
            return self
        if not (self.has_vertex(a) and self.has_vertex(b)):
            return self
        if self.has_edge(a, b):
            return self
        return replace(self, edges=self.edges + (Edge(a, b),))

    def move_vertex(self, vid: int, x: float, y: float) -> "GraphModel":
        i = self.index_of(vid)
        if i is None:
            return self
        moved = replace(self.vertices[i], x=float(x), y=float(y))
        return replace(self, vertices=self.vertices[:i] + (moved,) + self.vertices[i + 1:])

    def clear(self) -> "GraphModel":
        return GraphModel()

    def reset_colors(self) -> "GraphModel":
        return replace(self, vertices=tuple(replace(v, color=None) for v in self.vertices))

    def with_colors(self, colors: Mapping[int, Optional[int]]) -> "GraphModel":
        # ids missing from `colors` keep their current color
        return replace(
            self,
            vertices=tuple(replace(v, color=colors[v.id]) if v.id in colors else v for v in self.vertices),
        )

    @staticmethod
    def from_lists(vertices: List[Vertex], edges: List[Tuple[int, int]]) -> "GraphModel":
        g = GraphModel(vertices=tuple(vertices))
        for (a, b) in edges:
            g = g.add_edge(int(a), int(b))
        return g


# ---------------------------- Adjacency Index ---------------------------- #


def adjacency_lists(graph: GraphModel) -> Dict[int, List[int]]:
    adj: Dict[int, List[int]] = {v.id: [] for v in graph.vertices}
    for e in graph.edges:
        adj[e.source].append(e.target)
        adj[e.target].append(e.source)
    return adj


# ---------------------------- Store ---------------------------- #


@dataclass
class GraphStore:
    """Holds the current snapshot and the selected vertex.

    The store itself is mutable but never edits a snapshot; each operation swaps
    in the new value returned by :class:`GraphModel`.
    """

    graph: GraphModel = field(default_factory=GraphModel)
    selected_id: Optional[int] = None

    def replace(self, graph: GraphModel) -> None:
        self.graph = graph
        if self.selected_id is not None and not graph.has_vertex(self.selected_id):
            self.selected_id = None

    def select(self, vid: Optional[int]) -> None:
        if vid is not None and not self.graph.has_vertex(vid):
            return
        self.selected_id = vid

    def add_vertex(self, x: float, y: float) -> Vertex:
        self.graph = self.graph.add_vertex(x, y)
        v = self.graph.vertices[-1]
        logger.debug("added vertex %d at (%.1f, %.1f)", v.id, v.x, v.y)
        return v

    def add_edge(self, a: int, b: int) -> bool:
        new = self.graph.add_edge(a, b)
        if new is self.graph:
            return False
        self.graph = new
        logger.debug("added edge (%d, %d)", a, b)
        return True

    def move_vertex(self, vid: int, x: float, y: float) -> None:
        self.graph = self.graph.move_vertex(vid, x, y)

    def clear(self) -> None:
        self.graph = self.graph.clear()
        self.selected_id = None

    def reset_colors(self) -> None:
        self.graph = self.graph.reset_colors()
