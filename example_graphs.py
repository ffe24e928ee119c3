"""
Canonical example graphs: cycle C5, complete K4, a sparse 3+3 bipartite graph and
the Petersen graph. Ids run 0..n-1; coordinates fit a 600x600 canvas.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Tuple

import numpy as np

from graph_model import GraphModel, Vertex

logger = logging.getLogger(__name__)

CENTER = (300.0, 300.0)
RADIUS = 150.0
INNER_RADIUS = 75.0


def _ring(n: int, radius: float, first_id: int = 0, phase: float = 0.0) -> List[Vertex]:
    angles = phase + 2.0 * np.pi * np.arange(n) / n
    xs = CENTER[0] + radius * np.cos(angles)
    ys = CENTER[1] + radius * np.sin(angles)
    return [Vertex(first_id + i, float(x), float(y)) for i, (x, y) in enumerate(zip(xs, ys))]


def cycle_graph() -> GraphModel:
    n = 5
    edges = [(i, (i + 1) % n) for i in range(n)]
    return GraphModel.from_lists(_ring(n, RADIUS), edges)


def complete_graph() -> GraphModel:
    n = 4
    edges = [(i, j) for i in range(n) for j in range(i + 1, n)]
    return GraphModel.from_lists(_ring(n, RADIUS), edges)


def bipartite_graph() -> GraphModel:
    # Not K(3,3): 0-5, 1-4 and 2-3 are absent.
    left = [Vertex(i, 200.0, 150.0 + i * 150.0) for i in range(3)]
    right = [Vertex(i + 3, 400.0, 150.0 + i * 150.0) for i in range(3)]
    edges = [(0, 3), (0, 4), (1, 3), (1, 5), (2, 4), (2, 5)]
    return GraphModel.from_lists(left + right, edges)


def petersen_graph() -> GraphModel:
    outer = _ring(5, RADIUS)
    inner = _ring(5, INNER_RADIUS, first_id=5, phase=math.pi / 5)
    edges: List[Tuple[int, int]] = []
    edges += [(i, (i + 1) % 5) for i in range(5)]
    edges += [(i, i + 5) for i in range(5)]
    edges += [(5 + i, 5 + (i + 2) % 5) for i in range(5)]
    return GraphModel.from_lists(outer + inner, edges)


EXAMPLES: Dict[str, Callable[[], GraphModel]] = {
    "cycle": cycle_graph,
    "complete": complete_graph,
    "bipartite": bipartite_graph,
    "petersen": petersen_graph,
}

EXAMPLE_NAMES = tuple(EXAMPLES)

EXAMPLE_LABELS: Dict[str, str] = {
    "cycle": "Cycle (C5)",
    "complete": "Complete (K4)",
    "bipartite": "Bipartite Graph",
    "petersen": "Petersen Graph",
}


def load_example(name: str) -> GraphModel:
    make = EXAMPLES.get(name)
    if make is None:
        logger.warning("unknown example graph %r; returning an empty graph", name)
        return GraphModel()
    return make()
