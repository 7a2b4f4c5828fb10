import pytest

from weightedgraph import WeightedDirectedGraph


@pytest.fixture
def empty_graph():
    """A fresh graph with invariant checking forced on."""
    return WeightedDirectedGraph(check_rep=True)


@pytest.fixture
def scenario_graph(empty_graph):
    """Vertices A-E with edges A->B 8, B->D 7, E->B 2 (A->C set to 0)."""
    for label in "ABCDE":
        empty_graph.add_vertex(label)
    empty_graph.set_edge_weight("A", "B", 8)
    empty_graph.set_edge_weight("A", "C", 0)
    empty_graph.set_edge_weight("B", "D", 7)
    empty_graph.set_edge_weight("E", "B", 2)
    return empty_graph
