"""Graph fixtures for core tests."""

import pytest

from arbor.core.graph import Graph


def build_graph(labels, directed=(), undirected=()):
    """Build a graph from labels and (weight, from, to) triples."""
    graph = Graph()
    for label in labels:
        graph.add_node(label.upper(), label)
    for weight, from_label, to_label in directed:
        assert graph.add_directed_edge(weight, from_label, to_label)
    for weight, label_a, label_b in undirected:
        assert graph.add_undirected_edge(weight, label_a, label_b)
    return graph


@pytest.fixture
def empty_graph() -> Graph:
    """Fixture providing an empty graph."""
    return Graph()


@pytest.fixture
def triangle_graph() -> Graph:
    """
    Fixture providing a small mixed graph:
    a <-> b (3), b -> c (1), c -> a (2)
    """
    return build_graph("abc", directed=[(1, "b", "c"), (2, "c", "a")], undirected=[(3, "a", "b")])


@pytest.fixture
def path_graph() -> Graph:
    """
    Fixture providing nodes a..f where the cheap route to f goes through b:
    a -> b (1), b -> f (1), a -> f (10)
    """
    return build_graph("abcdef", directed=[(1, "a", "b"), (1, "b", "f"), (10, "a", "f")])


@pytest.fixture
def weighted_undirected_graph() -> Graph:
    """
    Fixture providing a connected undirected graph with distinct weights.

    Minimum spanning tree: a-c (1), b-c (2), d-e (3), b-d (5), d-f (6), cost 17.
    """
    return build_graph(
        "abcdef",
        undirected=[
            (4, "a", "b"),
            (1, "a", "c"),
            (2, "b", "c"),
            (5, "b", "d"),
            (8, "c", "d"),
            (10, "c", "e"),
            (3, "d", "e"),
            (6, "d", "f"),
            (7, "e", "f"),
        ],
    )


@pytest.fixture
def graph_factory():
    """Fixture providing the graph builder used by the other fixtures."""
    return build_graph
