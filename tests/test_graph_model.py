from typing import List

import pytest

from graph_model import Edge, GraphModel, GraphStore, Vertex, adjacency_lists


def test_add_vertex_on_empty_graph_gets_id_zero(empty_graph: GraphModel) -> None:
    g = empty_graph.add_vertex(10, 20)
    assert g.ids() == [0]
    assert g.vertices[0] == Vertex(0, 10.0, 20.0, None)


def test_add_vertex_uses_max_id_plus_one() -> None:
    g = GraphModel(vertices=(Vertex(0, 0, 0), Vertex(2, 0, 0), Vertex(5, 0, 0)))
    assert g.add_vertex(1, 1).ids() == [0, 2, 5, 6]


def test_operations_do_not_mutate_original(path_graph: GraphModel) -> None:
    before = path_graph
    moved = path_graph.move_vertex(1, 500, 500)
    added = path_graph.add_edge(2, 3)
    assert path_graph is before
    assert path_graph.vertex(1).x == 100.0
    assert moved.vertex(1).x == 500.0
    assert path_graph.n_edges == 2
    assert added.n_edges == 3


@pytest.mark.parametrize("a, b", [(0, 1), (1, 0), (2, 2), (0, 99)])
def test_add_edge_noop_returns_same_snapshot(path_graph: GraphModel, a: int, b: int) -> None:
    assert path_graph.add_edge(a, b) is path_graph


def test_add_edge_is_idempotent(path_graph: GraphModel) -> None:
    once = path_graph.add_edge(0, 3)
    twice = once.add_edge(0, 3).add_edge(3, 0)
    assert once.edges == twice.edges
    assert once.edges[-1] == Edge(0, 3)


def test_move_vertex_keeps_structure_and_colors(path_graph: GraphModel) -> None:
    colored = path_graph.with_colors({0: 0, 1: 1, 2: 0, 3: 0})
    moved = colored.move_vertex(2, 7, 8)
    assert moved.edges == colored.edges
    assert moved.colors() == colored.colors()
    assert (moved.vertex(2).x, moved.vertex(2).y) == (7.0, 8.0)
    assert moved.ids() == colored.ids()


def test_move_unknown_vertex_is_noop(path_graph: GraphModel) -> None:
    assert path_graph.move_vertex(42, 0, 0) is path_graph


def test_reset_colors_and_clear(path_graph: GraphModel) -> None:
    colored = path_graph.with_colors({0: 0, 1: 1})
    reset = colored.reset_colors()
    assert all(c is None for c in reset.colors().values())
    assert reset.edges == colored.edges
    assert colored.clear() == GraphModel()


@pytest.mark.parametrize(
    "node, neighs",
    [(0, [1]), (1, [0, 2]), (2, [1]), (3, [])],
)
def test_adjacency_lists(path_graph: GraphModel, node: int, neighs: List[int]) -> None:
    assert adjacency_lists(path_graph)[node] == neighs


def test_adjacency_follows_edge_insertion_order(cycle: GraphModel) -> None:
    adj = adjacency_lists(cycle)
    # edges are (0,1), (1,2), (2,3), (3,4), (4,0)
    assert adj[0] == [1, 4]
    assert adj[4] == [3, 0]


def test_positions_shape(path_graph: GraphModel, empty_graph: GraphModel) -> None:
    assert path_graph.positions().shape == (4, 2)
    assert empty_graph.positions().shape == (0, 2)


def test_store_add_edge_reports_noop() -> None:
    store = GraphStore()
    a = store.add_vertex(0, 0)
    b = store.add_vertex(100, 0)
    assert store.add_edge(a.id, b.id) is True
    assert store.add_edge(b.id, a.id) is False
    assert store.add_edge(a.id, a.id) is False
    assert store.graph.n_edges == 1


def test_store_drops_selection_of_missing_vertex() -> None:
    store = GraphStore()
    v = store.add_vertex(0, 0)
    store.select(v.id)
    assert store.selected_id == v.id
    store.replace(GraphModel())
    assert store.selected_id is None
    store.select(5)
    assert store.selected_id is None
