"""
Tests for graph loading.
"""

import json

import pytest

from arbor.core.exceptions import ConfigurationError, NodeNotFoundError, ValidationError
from arbor.loader import (
    graph_from_matrix,
    load_document,
    load_graph,
    load_matrix,
    matrix_label,
    parse_json_input,
    parse_matrix,
)


def test_matrix_label():
    """Test that matrix rows map to consecutive letters."""
    assert [matrix_label(i) for i in range(3)] == ["a", "b", "c"]
    assert matrix_label(25) == "z"


def test_parse_matrix_ignores_separators():
    """Test that every digit is a cell whatever separates them."""
    assert parse_matrix("0 1,2\n3\t4 5\n\n") == [[0, 1, 2], [3, 4, 5]]
    assert parse_matrix("012\n") == [[0, 1, 2]]


def test_graph_from_matrix():
    """Test that non-zero cells become directed edges."""
    graph = graph_from_matrix([[0, 2, 0], [2, 0, 3], [0, 0, 0]])

    assert graph.get_nodes() == ["a", "b", "c"]
    assert graph.get_payload("a") is True
    assert graph.has_edge("a", "b", 2)
    assert graph.has_edge("b", "c", 3)
    assert not graph.has_edge("c", "b")
    # Symmetric cells pair up
    assert graph.find_edge(2, "a", "b").paired
    assert not graph.find_edge(3, "b", "c").paired


def test_graph_from_matrix_ignores_cells_without_column_node():
    """Test that a row longer than the matrix does not create edges."""
    graph = graph_from_matrix([[0, 1, 7]])
    assert graph.get_nodes() == ["a"]
    assert graph.get_edge_count() == 0


def test_graph_from_matrix_too_many_rows():
    """Test that more rows than letters are rejected."""
    with pytest.raises(ConfigurationError, match="maximum is 26"):
        graph_from_matrix([[0]] * 27)


def test_load_matrix(sample_matrix_file):
    """Test loading the sample matrix file."""
    graph = load_matrix(sample_matrix_file)

    assert len(graph) == 6
    assert graph.get_edge_count() == 18
    assert graph.cost() == 4 + 1 + 2 + 5 + 8 + 9 + 3 + 6 + 7


def test_load_matrix_requires_txt(tmp_path):
    """Test that only .txt files are read as matrices."""
    path = tmp_path / "graph.csv"
    path.write_text("0 1\n1 0\n", encoding="utf-8")

    with pytest.raises(ValidationError, match="must be a .txt file"):
        load_matrix(path)


def test_load_matrix_missing_file(tmp_path):
    """Test that a missing file surfaces as an OS error."""
    with pytest.raises(FileNotFoundError):
        load_matrix(tmp_path / "absent.txt")


def test_load_document():
    """Test building a graph from a JSON document."""
    graph = load_document(
        {
            "nodes": [{"label": "a", "payload": {"city": "Oslo"}}, {"label": "b"}],
            "edges": [
                {"from": "a", "to": "b", "weight": 4, "undirected": True},
                {"from": "b", "to": "a", "weight": "toll"},
            ],
        }
    )

    assert graph.get_payload("a") == {"city": "Oslo"}
    assert graph.get_payload("b") is True
    assert graph.find_edge(4, "a", "b").paired
    assert graph.has_edge("b", "a", "toll")
    assert graph.cost() == 4


def test_load_document_schema_violation():
    """Test that malformed documents are rejected."""
    with pytest.raises(ValidationError, match="edges/0"):
        load_document({"nodes": [{"label": "a"}], "edges": [{"from": "a", "weight": 1}]})

    with pytest.raises(ValidationError):
        load_document([])


def test_load_document_blank_label():
    """Test that whitespace-only labels are rejected before any node is built."""
    with pytest.raises(ValidationError, match="nodes/1/label"):
        load_document({"nodes": [{"label": "a"}, {"label": " \t"}]})

    with pytest.raises(ValidationError, match="edges/0/to"):
        load_document({"nodes": [{"label": "a"}], "edges": [{"from": "a", "to": " ", "weight": 1}]})


def test_load_document_unknown_node():
    """Test that edges must reference declared nodes."""
    with pytest.raises(NodeNotFoundError, match="unknown node 'z'"):
        load_document({"nodes": [{"label": "a"}], "edges": [{"from": "a", "to": "z", "weight": 1}]})


def test_parse_json_input_inline():
    """Test parsing inline JSON."""
    assert parse_json_input('{"nodes": []}') == {"nodes": []}

    with pytest.raises(ValidationError, match="Invalid JSON input"):
        parse_json_input("{nodes")


def test_parse_json_input_file(tmp_path):
    """Test parsing JSON from an @file reference."""
    path = tmp_path / "graph.json"
    path.write_text(json.dumps({"nodes": [{"label": "a"}]}), encoding="utf-8")

    assert parse_json_input(f"@{path}") == {"nodes": [{"label": "a"}]}

    with pytest.raises(ValidationError, match="File not found"):
        parse_json_input(f"@{tmp_path / 'absent.json'}")


def test_load_graph_dispatch(sample_matrix_file):
    """Test choosing the loader from the input form."""
    assert len(load_graph(str(sample_matrix_file))) == 6
    assert load_graph('{"nodes": [{"label": "q"}]}').get_nodes() == ["q"]
