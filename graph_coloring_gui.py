"""
Graph coloring simulator GUI

Features (matplotlib + numpy):
- Left click on empty space to add a vertex.
- Left click a vertex to select it, then another vertex to connect them.
  Clicking the selected vertex again clears the selection.
- Press and drag any vertex to move it.
- Hovering a vertex highlights its neighbours.
- "Color Graph" runs greedy first-fit coloring in vertex order.
- "Step-By-Step" + "Next Step" replays the coloring one vertex at a time.
- Example graphs: cycle C5, complete K4, a 3+3 bipartite graph, Petersen.

Notes:
- Greedy coloring gives an upper bound on the chromatic number; the number shown
  is the count of colors the greedy pass used.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.patches import Circle
from matplotlib.widgets import Button, RadioButtons

from coloring_session import ColoringSession
from example_graphs import EXAMPLE_LABELS
from graph_editor import EditEvent, EditorParams
from graph_model import adjacency_lists

logger = logging.getLogger(__name__)


@dataclass
class ViewParams:
    canvas_size: float = 600.0
    palette: str = "tab10"
    uncolored: str = "#E5E7EB"
    border: str = "#4B5563"
    hover: str = "#2563EB"
    edge_width: float = 2.0
    border_width: float = 2.0
    selected_border_width: float = 4.0


class ColoringApp:
    def __init__(self, view: Optional[ViewParams] = None, editor: Optional[EditorParams] = None) -> None:
        self.view = view if view is not None else ViewParams()
        self.session = ColoringSession(editor)
        self.cmap = matplotlib.colormaps[self.view.palette]

        self.fig, self.ax = plt.subplots(figsize=(10.5, 6))
        self.fig.canvas.manager.set_window_title("Graph Coloring Simulator")
        size = self.view.canvas_size
        self.ax.set_xlim(0, size)
        self.ax.set_ylim(size, 0)  # screen orientation: y grows downward
        self.ax.set_aspect("equal", adjustable="box")
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        self.ax.set_title("Click empty space to add a vertex; click two vertices to add an edge")
        # Reserve right margin for controls
        self.ax.set_position([0.03, 0.06, 0.62, 0.88])

        # artists
        self.edge_collection = LineCollection([], colors=self.view.border, linewidths=self.view.edge_width, zorder=2)
        self.ax.add_collection(self.edge_collection)
        self.hover_edge_collection = LineCollection([], colors=self.view.hover, linewidths=self.view.edge_width + 1, zorder=2.5)
        self.ax.add_collection(self.hover_edge_collection)
        self.vertex_collection = PatchCollection([], zorder=3)
        self.ax.add_collection(self.vertex_collection)
        self.vertex_labels: List[plt.Text] = []

        self.status_text = self.ax.text(0.02, 0.98, "", transform=self.ax.transAxes, va="top", ha="left", fontsize=9, color="black",
                                        bbox=dict(boxstyle="round,pad=0.3", fc="#f0f0f0", ec="#999999", alpha=0.8))
        self.info_text = self.fig.text(0.70, 0.30, "", fontsize=10, va="top", ha="left", family="monospace")

        self._build_widgets()

        # events
        self.cid_press = self.fig.canvas.mpl_connect("button_press_event", self.on_press)
        self.cid_move = self.fig.canvas.mpl_connect("motion_notify_event", self.on_move)
        self.cid_release = self.fig.canvas.mpl_connect("button_release_event", self.on_release)
        self.cid_leave = self.fig.canvas.mpl_connect("axes_leave_event", self.on_leave)

        self._set_status(self.session.status)
        self._redraw()

    # ---------------- UI ---------------- #
    def _build_widgets(self) -> None:
        right = 0.70
        pad = 0.008
        bw = 0.25
        bh = 0.05
        y = 0.90
        self.ax_color = self.fig.add_axes([right, y, bw, bh]); y -= (bh + pad)
        self.ax_steps = self.fig.add_axes([right, y, bw, bh]); y -= (bh + pad)
        self.ax_next = self.fig.add_axes([right, y, bw, bh]); y -= (bh + pad)
        self.ax_reset = self.fig.add_axes([right, y, bw, bh]); y -= (bh + pad)
        self.ax_clear = self.fig.add_axes([right, y, bw, bh]); y -= (bh + pad)
        self.ax_examples = self.fig.add_axes([right, y - 0.18, bw, 0.18])

        self.btn_color = Button(self.ax_color, "Color Graph", color="#e1efff", hovercolor="#cfe4ff")
        self.btn_color.on_clicked(self.on_color_clicked)

        self.btn_steps = Button(self.ax_steps, "Step-By-Step Coloring", color="#f3f3f3", hovercolor="#e7e7e7")
        self.btn_steps.on_clicked(self.on_step_mode_clicked)

        self.btn_next = Button(self.ax_next, "Next Step", color="#e8ffe8", hovercolor="#d7ffd7")
        self.btn_next.on_clicked(self.on_next_step_clicked)

        self.btn_reset = Button(self.ax_reset, "Reset Colors", color="#f9f9f9", hovercolor="#ececec")
        self.btn_reset.on_clicked(self.on_reset_clicked)

        self.btn_clear = Button(self.ax_clear, "Clear Graph", color="#ffecec", hovercolor="#ffdcdc")
        self.btn_clear.on_clicked(self.on_clear_clicked)

        self.ax_examples.set_title("Load Example", fontsize=9)
        self._example_by_label = {label: name for name, label in EXAMPLE_LABELS.items()}
        self.rb_examples = RadioButtons(self.ax_examples, list(self._example_by_label))
        self.rb_examples.on_clicked(self.on_example_selected)

    # ---------------- Events ---------------- #
    def on_press(self, event):
        if event.inaxes != self.ax:
            return
        if event.xdata is None or event.ydata is None or event.button != 1:
            return
        ev = self.session.pointer_down(float(event.xdata), float(event.ydata))
        if ev is not EditEvent.NONE:
            self._set_status(self.session.status)
        self._redraw()

    def on_move(self, event):
        if event.inaxes != self.ax or event.xdata is None or event.ydata is None:
            return
        before = self.session.editor.state.hover_id
        ev = self.session.pointer_move(float(event.xdata), float(event.ydata))
        if ev is EditEvent.VERTEX_MOVED or self.session.editor.state.hover_id != before:
            self._redraw()

    def on_release(self, _):
        self.session.pointer_up()

    def on_leave(self, event):
        if event.inaxes != self.ax:
            return
        self.session.pointer_leave()
        self._redraw()

    # ---------------- Buttons ---------------- #
    def on_color_clicked(self, _):
        self.session.color_all()
        self._set_status(self.session.status)
        self._redraw()

    def on_step_mode_clicked(self, _):
        self.session.start_step_by_step()
        self._set_status(self.session.status)
        self._redraw()

    def on_next_step_clicked(self, _):
        self.session.next_step()
        self._set_status(self.session.status)
        self._redraw()

    def on_reset_clicked(self, _):
        self.session.reset_coloring()
        self._set_status(self.session.status)
        self._redraw()

    def on_clear_clicked(self, _):
        self.session.clear()
        self._set_status(self.session.status)
        self._redraw()

    def on_example_selected(self, label: str) -> None:
        self.session.load_example(self._example_by_label.get(label, label))
        self._set_status(self.session.status)
        self._redraw()

    # ---------------- Drawing helpers ---------------- #
    def _face_color(self, color: Optional[int]):
        if color is None:
            return self.view.uncolored
        return self.cmap(color % self.cmap.N)

    def _redraw(self) -> None:
        graph = self.session.graph
        state = self.session.editor.state
        r = self.session.editor.params.vertex_radius
        hover = state.hover_id
        neighbors = set(adjacency_lists(graph).get(hover, [])) if hover is not None else set()

        # edges
        pos = {v.id: (v.x, v.y) for v in graph.vertices}
        self.edge_collection.set_segments([[pos[e.source], pos[e.target]] for e in graph.edges])
        self.hover_edge_collection.set_segments(
            [[pos[e.source], pos[e.target]] for e in graph.edges if hover is not None and e.touches(hover)]
        )

        # vertices
        self.vertex_collection.set_paths([Circle((v.x, v.y), r) for v in graph.vertices])
        self.vertex_collection.set_facecolor([self._face_color(v.color) for v in graph.vertices])
        self.vertex_collection.set_edgecolor(
            [self.view.hover if (v.id == hover or v.id in neighbors) else self.view.border for v in graph.vertices]
        )
        self.vertex_collection.set_linewidth(
            [self.view.selected_border_width if v.id == state.selected_id else self.view.border_width for v in graph.vertices]
        )

        # labels follow vertices
        for t in self.vertex_labels:
            t.remove()
        self.vertex_labels = [
            self.ax.text(v.x, v.y, str(v.id), color="#1F2937", fontsize=10, fontweight="bold",
                         ha="center", va="center", zorder=5)
            for v in graph.vertices
        ]

        self._update_info()
        self.fig.canvas.draw_idle()

    def _update_info(self) -> None:
        graph = self.session.graph
        k = self.session.color_count
        lines = [
            f"Chromatic Number (x): {k if k is not None else 'N/A'}",
            f"Vertices: {graph.n_vertices}",
            f"Edges:    {graph.n_edges}",
        ]
        if self.session.step_mode:
            lines.append(f"Step:     {self.session.step_index}/{len(self.session.steps)}")
        self.info_text.set_text("\n".join(lines))

    def _set_status(self, msg: str) -> None:
        self.status_text.set_text(msg)
        self.fig.canvas.draw_idle()

    # ---------------- Run ---------------- #
    def run(self) -> None:
        plt.show()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app = ColoringApp()
    app.run()


if __name__ == "__main__":
    main()
