from types import SimpleNamespace

import matplotlib.pyplot as plt
import pytest

from graph_coloring_gui import ColoringApp


@pytest.fixture
def app():
    a = ColoringApp()
    yield a
    plt.close(a.fig)


def _mouse(app: ColoringApp, x: float, y: float, button: int = 1):
    return SimpleNamespace(inaxes=app.ax, xdata=x, ydata=y, button=button)


def test_click_builds_graph(app: ColoringApp) -> None:
    app.on_press(_mouse(app, 100, 100))
    app.on_release(None)
    app.on_press(_mouse(app, 300, 100))
    app.on_release(None)
    app.on_press(_mouse(app, 100, 100))
    app.on_release(None)
    app.on_press(_mouse(app, 300, 100))
    app.on_release(None)
    graph = app.session.graph
    assert graph.n_vertices == 2
    assert graph.has_edge(0, 1)
    assert len(app.vertex_labels) == 2
    assert app.status_text.get_text() == "Added edge (0, 1)."


def test_clicks_outside_canvas_or_other_buttons_are_ignored(app: ColoringApp) -> None:
    app.on_press(SimpleNamespace(inaxes=None, xdata=None, ydata=None, button=1))
    app.on_press(_mouse(app, 100, 100, button=3))
    assert app.session.graph.is_empty


def test_drag_and_leave(app: ColoringApp) -> None:
    app.on_press(_mouse(app, 100, 100))
    app.on_press(_mouse(app, 100, 100))
    app.on_move(_mouse(app, 200, 250))
    v = app.session.graph.vertex(0)
    assert (v.x, v.y) == (200.0, 250.0)
    app.on_leave(SimpleNamespace(inaxes=app.ax))
    assert not app.session.editor.state.dragging


def test_example_and_coloring_buttons(app: ColoringApp) -> None:
    app.on_example_selected("Complete (K4)")
    assert app.session.graph.n_vertices == 4
    app.on_color_clicked(None)
    assert app.session.color_count == 4
    assert "Chromatic Number (x): 4" in app.info_text.get_text()

    app.on_step_mode_clicked(None)
    for _ in range(5):
        app.on_next_step_clicked(None)
    assert app.session.replay_finished
    assert app.status_text.get_text() == "Graph colored successfully using 4 colors."

    app.on_reset_clicked(None)
    assert app.session.color_count is None
    app.on_clear_clicked(None)
    assert app.session.graph.is_empty
    assert app.vertex_labels == []


def test_color_empty_graph_shows_status(app: ColoringApp) -> None:
    app.on_color_clicked(None)
    assert "empty graph" in app.status_text.get_text()
