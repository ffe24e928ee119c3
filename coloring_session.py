"""
Session-level API used by the GUI.

Wraps the graph store, the editor and the coloring engine, keeps the step
replay cursor and the status line, and turns engine errors into
:class:`OperationResult` values.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from example_graphs import EXAMPLE_LABELS, load_example
from graph_editor import EditEvent, EditorParams, GraphEditor
from graph_model import GraphModel, GraphStore
from greedy_coloring import ColoringStep, InvalidOperationError, color_all, color_step_by_step

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Draw a graph or load an example."


@dataclass(frozen=True)
class OperationResult:
    ok: bool
    message: str
    value: Any = None


def _colors_phrase(k: int) -> str:
    return f"{k} color{'s' if k != 1 else ''}"


class ColoringSession:
    def __init__(self, params: Optional[EditorParams] = None) -> None:
        self.store = GraphStore()
        self.editor = GraphEditor(self.store, params)
        self.color_count: Optional[int] = None
        self.steps: List[ColoringStep] = []
        self.step_index: int = 0
        self.step_mode: bool = False
        self.status: str = DEFAULT_STATUS

    @property
    def graph(self) -> GraphModel:
        return self.store.graph

    @property
    def replay_finished(self) -> bool:
        return self.step_mode and self.step_index >= len(self.steps)

    def _result(self, ok: bool, message: str, value: Any = None) -> OperationResult:
        self.status = message
        return OperationResult(ok, message, value)

    def _end_replay(self) -> None:
        self.steps = []
        self.step_index = 0
        self.step_mode = False

    # ---------------- Editing ---------------- #
    def create_vertex(self, x: float, y: float) -> OperationResult:
        self._end_replay()
        v = self.store.add_vertex(x, y)
        return self._result(True, f"Added vertex {v.id}.", v)

    def create_edge(self, source_id: int, target_id: int) -> OperationResult:
        if not self.store.add_edge(source_id, target_id):
            return self._result(False, f"Edge ({source_id}, {target_id}) not added.")
        self._end_replay()
        return self._result(True, f"Added edge ({source_id}, {target_id}).")

    def relocate_vertex(self, vid: int, x: float, y: float) -> OperationResult:
        if not self.graph.has_vertex(vid):
            return self._result(False, f"No vertex {vid}.")
        self.store.move_vertex(vid, x, y)
        return OperationResult(True, self.status)

    def pointer_down(self, x: float, y: float) -> EditEvent:
        ev = self.editor.pointer_down(x, y)
        if ev is EditEvent.VERTEX_ADDED:
            self._end_replay()
            self.status = f"Added vertex {self.editor.last_vertex_id}."
        elif ev is EditEvent.VERTEX_SELECTED:
            self.status = f"Selected vertex {self.editor.last_vertex_id}. Click another vertex to add an edge."
        elif ev is EditEvent.VERTEX_DESELECTED:
            self.status = "Selection cleared."
        elif ev is EditEvent.EDGE_ADDED:
            self._end_replay()
            a, b = self.editor.last_edge
            self.status = f"Added edge ({a}, {b})."
        elif ev is EditEvent.EDGE_EXISTS:
            a, b = self.editor.last_edge
            self.status = f"Edge ({a}, {b}) already exists."
        return ev

    def pointer_move(self, x: float, y: float) -> EditEvent:
        return self.editor.pointer_move(x, y)

    def pointer_up(self) -> EditEvent:
        return self.editor.pointer_up()

    def pointer_leave(self) -> EditEvent:
        return self.editor.pointer_leave()

    def clear(self) -> OperationResult:
        self.editor.clear()
        self._end_replay()
        self.color_count = None
        return self._result(True, DEFAULT_STATUS, self.graph)

    def load_example(self, name: str) -> OperationResult:
        self._end_replay()
        self.color_count = None
        graph = load_example(name)
        self.editor.load(graph)
        label = EXAMPLE_LABELS.get(name, name)
        return self._result(True, f"Loaded example: {label}. Click 'Color Graph' to see the coloring.", graph)

    # ---------------- Coloring ---------------- #
    def color_all(self) -> OperationResult:
        if self.step_mode and not self.replay_finished:
            return self._result(False, "Finish the step-by-step coloring first.")
        try:
            res = color_all(self.graph)
        except InvalidOperationError as e:
            return self._result(False, str(e))
        self._end_replay()
        self.store.replace(res.graph)
        self.color_count = res.color_count
        return self._result(True, f"Graph colored successfully using {_colors_phrase(res.color_count)}.", res)

    def reset_coloring(self) -> OperationResult:
        self.store.reset_colors()
        self.color_count = None
        self._end_replay()
        return self._result(True, DEFAULT_STATUS)

    def start_step_by_step(self) -> OperationResult:
        try:
            steps = color_step_by_step(self.graph)
        except InvalidOperationError as e:
            return self._result(False, str(e))
        self.reset_coloring()
        self.steps = steps
        self.step_index = 0
        self.step_mode = True
        return self._result(True, "Click 'Next Step' to begin coloring vertices one by one.", steps)

    def next_step(self) -> OperationResult:
        if not self.step_mode:
            return self._result(False, "Start step-by-step coloring first.")
        if self.replay_finished:
            return self._result(False, "All vertices are already colored.")

        step = self.steps[self.step_index]
        # colors only; positions stay as currently dragged
        self.store.replace(self.graph.with_colors(step.graph.colors()))
        self.step_index += 1

        if self.replay_finished:
            k = step.graph.color_count()
            self.color_count = k
            return self._result(True, f"Graph colored successfully using {_colors_phrase(k)}.", step)
        if step.vertex_id is None:
            return self._result(True, "All vertices uncolored. Click 'Next Step' to color the first vertex.", step)
        return self._result(True, f"Colored vertex {step.vertex_id} with color {step.color + 1}.", step)
