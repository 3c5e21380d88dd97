"""Graph loading from adjacency-matrix text files and JSON graph documents.

An adjacency matrix file has one row per line. Every decimal digit in a line
is one cell, so weights are single digits and any separators are ignored.
Rows and columns are named ``a``, ``b``, ... in order, and each non-zero cell
becomes a directed edge from the row node to the column node:

    0 3 0
    3 0 1
    0 1 0

JSON graph documents list nodes and edges explicitly; see
``arbor.utils.validation.schema`` for their shape. They are given either as a
JSON string or as ``@path/to/file.json``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from arbor.core.constants import (
    DEFAULT_NODE_PAYLOAD,
    FIRST_LABEL,
    MATRIX_FILE_SUFFIX,
    MAX_MATRIX_NODES,
)
from arbor.core.exceptions import ConfigurationError, NodeNotFoundError, ValidationError
from arbor.core.graph import Graph
from arbor.utils.validation import SchemaValidator

logger = logging.getLogger(__name__)


def matrix_label(index: int) -> str:
    """Get the label of the node in matrix row ``index``."""
    return chr(ord(FIRST_LABEL) + index)


def parse_matrix(text: str) -> List[List[int]]:
    """Parse adjacency matrix text into rows of single-digit weights.

    Blank lines are skipped.
    """
    matrix = []
    for line in text.splitlines():
        if not line.strip():
            continue
        matrix.append([int(char) for char in line if "0" <= char <= "9"])
    return matrix


def graph_from_matrix(matrix: Sequence[Sequence[int]]) -> Graph:
    """Build a graph from a weight matrix.

    Args:
        matrix: Rows of weights; a weight of 0 means no edge

    Returns:
        Graph: Nodes ``a``, ``b``, ... with a directed edge per non-zero cell

    Raises:
        ConfigurationError: If the matrix has more rows than there are labels
    """
    if len(matrix) > MAX_MATRIX_NODES:
        raise ConfigurationError(
            f"too many nodes to be processed: {len(matrix)} (maximum is {MAX_MATRIX_NODES})"
        )

    graph = Graph()
    for index in range(len(matrix)):
        graph.add_node(DEFAULT_NODE_PAYLOAD, matrix_label(index))

    for row, weights in enumerate(matrix):
        for col, weight in enumerate(weights):
            if weight <= 0:
                continue
            if col >= len(matrix):
                logger.warning(f"Ignoring cell ({row}, {col}): no node in column {col}")
                continue
            graph.add_directed_edge(weight, matrix_label(row), matrix_label(col))
    return graph


def load_matrix(path: Union[str, Path]) -> Graph:
    """Load a graph from an adjacency matrix text file.

    Raises:
        ValidationError: If the file is not a ``.txt`` file
        ConfigurationError: If the matrix has too many rows
        OSError: If the file cannot be read
    """
    path = Path(path)
    if path.suffix != MATRIX_FILE_SUFFIX:
        raise ValidationError(f"matrix input must be a {MATRIX_FILE_SUFFIX} file: {path}")

    with path.open("r", encoding="utf-8") as handle:
        matrix = parse_matrix(handle.read())
    graph = graph_from_matrix(matrix)
    logger.info(f"Loaded {len(graph)} nodes and {graph.get_edge_count()} edges from {path}")
    return graph


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str: Either a JSON string or a file path prefixed with '@'.
            Relative file paths are resolved against the current directory.

    Raises:
        ValidationError: If the JSON is invalid or the file is not found
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValidationError(f"File not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}")


def load_document(document: Dict[str, Any]) -> Graph:
    """Build a graph from a decoded graph document.

    Raises:
        ValidationError: If the document does not match the schema
        NodeNotFoundError: If an edge references an undeclared node
    """
    result = SchemaValidator().validate_document(document)
    if not result.is_valid:
        location = result.context["path"] if result.context else "<root>"
        raise ValidationError(f"{location}: {'; '.join(result.errors)}")

    graph = Graph()
    for node in document["nodes"]:
        if not graph.add_node(node.get("payload", DEFAULT_NODE_PAYLOAD), node["label"]):
            logger.warning(f"Duplicate node label {node['label']!r} ignored")

    for edge in document.get("edges", []):
        for label in (edge["from"], edge["to"]):
            if not graph.has_node(label):
                raise NodeNotFoundError(f"Edge references unknown node '{label}'")
        if edge.get("undirected", False):
            graph.add_undirected_edge(edge["weight"], edge["from"], edge["to"])
        else:
            graph.add_directed_edge(edge["weight"], edge["from"], edge["to"])

    logger.info(f"Loaded {len(graph)} nodes and {graph.get_edge_count()} edges from document")
    return graph


def load_graph(source: str) -> Graph:
    """Load a graph from a matrix file path, an ``@file`` JSON path or inline JSON."""
    if source.startswith("@") or source.lstrip().startswith("{"):
        return load_document(parse_json_input(source))
    return load_matrix(source)
