"""
Pointer-driven graph editing.

Click empty space to add a vertex. Click a vertex to select it, then click a
second vertex to connect them. Pressing on any vertex also starts dragging it
until the pointer is released or leaves the canvas.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from graph_model import GraphModel, GraphStore

logger = logging.getLogger(__name__)


@dataclass
class EditorParams:
    vertex_radius: float = 20.0


class EditMode(enum.Enum):
    IDLE = "idle"
    VERTEX_SELECTED = "vertex_selected"


class EditEvent(enum.Enum):
    NONE = "none"
    VERTEX_ADDED = "vertex_added"
    VERTEX_SELECTED = "vertex_selected"
    VERTEX_DESELECTED = "vertex_deselected"
    EDGE_ADDED = "edge_added"
    EDGE_EXISTS = "edge_exists"
    VERTEX_MOVED = "vertex_moved"


@dataclass(frozen=True)
class EditorState:
    selected_id: Optional[int] = None
    drag_id: Optional[int] = None
    hover_id: Optional[int] = None

    @property
    def mode(self) -> EditMode:
        return EditMode.IDLE if self.selected_id is None else EditMode.VERTEX_SELECTED

    @property
    def dragging(self) -> bool:
        return self.drag_id is not None


def vertex_at(graph: GraphModel, x: float, y: float, radius: float) -> Optional[int]:
    """Id of the vertex under ``(x, y)``; the latest added wins when several overlap."""
    if graph.is_empty:
        return None
    pos = graph.positions()
    d2 = (pos[:, 0] - x) ** 2 + (pos[:, 1] - y) ** 2
    hits = np.flatnonzero(d2 <= radius ** 2)
    if hits.size == 0:
        return None
    return graph.vertices[int(hits[-1])].id


class GraphEditor:
    def __init__(self, store: Optional[GraphStore] = None, params: Optional[EditorParams] = None) -> None:
        self.store = store if store is not None else GraphStore()
        self.params = params if params is not None else EditorParams()
        self.state = EditorState(selected_id=self.store.selected_id)
        # filled in by pointer_down for status messages
        self.last_vertex_id: Optional[int] = None
        self.last_edge: Optional[tuple] = None

    @property
    def graph(self) -> GraphModel:
        return self.store.graph

    def hit(self, x: float, y: float) -> Optional[int]:
        return vertex_at(self.store.graph, x, y, self.params.vertex_radius)

    def _set_state(self, state: EditorState) -> None:
        self.state = state
        self.store.select(state.selected_id)

    # ---- events ---- #
    def pointer_down(self, x: float, y: float) -> EditEvent:
        vid = self.hit(x, y)
        sel = self.state.selected_id
        if vid is None:
            if sel is None:
                v = self.store.add_vertex(x, y)
                self.last_vertex_id = v.id
                return EditEvent.VERTEX_ADDED
            self._set_state(replace(self.state, selected_id=None))
            return EditEvent.VERTEX_DESELECTED

        self.last_vertex_id = vid
        if sel is None:
            self._set_state(replace(self.state, selected_id=vid, drag_id=vid))
            logger.debug("selected vertex %d", vid)
            return EditEvent.VERTEX_SELECTED
        if sel == vid:
            self._set_state(replace(self.state, selected_id=None, drag_id=vid))
            return EditEvent.VERTEX_DESELECTED

        self.last_edge = (sel, vid)
        added = self.store.add_edge(sel, vid)
        self._set_state(replace(self.state, selected_id=None, drag_id=vid))
        return EditEvent.EDGE_ADDED if added else EditEvent.EDGE_EXISTS

    def pointer_move(self, x: float, y: float) -> EditEvent:
        hover = self.hit(x, y)
        if self.state.drag_id is None:
            self.state = replace(self.state, hover_id=hover)
            return EditEvent.NONE
        self.store.move_vertex(self.state.drag_id, x, y)
        self.state = replace(self.state, hover_id=hover)
        return EditEvent.VERTEX_MOVED

    def pointer_up(self) -> EditEvent:
        self.state = replace(self.state, drag_id=None)
        return EditEvent.NONE

    def pointer_leave(self) -> EditEvent:
        self.state = replace(self.state, drag_id=None, hover_id=None)
        return EditEvent.NONE

    # ---- whole-graph ops ---- #
    def clear(self) -> None:
        self.store.clear()
        self.state = EditorState()

    def load(self, graph: GraphModel) -> None:
        self.store.replace(graph)
        self.state = EditorState()
        self.store.select(None)
