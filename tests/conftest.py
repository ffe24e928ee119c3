import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from example_graphs import bipartite_graph, complete_graph, cycle_graph, petersen_graph  # noqa: E402
from graph_model import GraphModel, Vertex  # noqa: E402


@pytest.fixture
def empty_graph() -> GraphModel:
    return GraphModel()


@pytest.fixture
def path_graph() -> GraphModel:
    # 0 - 1 - 2, plus an isolated vertex 3
    vertices = [Vertex(i, 100.0 * i, 50.0) for i in range(4)]
    return GraphModel.from_lists(vertices, [(0, 1), (1, 2)])


@pytest.fixture
def cycle() -> GraphModel:
    return cycle_graph()


@pytest.fixture
def k4() -> GraphModel:
    return complete_graph()


@pytest.fixture
def bipartite() -> GraphModel:
    return bipartite_graph()


@pytest.fixture
def petersen() -> GraphModel:
    return petersen_graph()
