"""Shared test fixtures."""

import pytest

# Symmetric adjacency matrix over a..f. Its unique minimum spanning tree is
# a-c (1), b-c (2), d-e (3), b-d (5), d-f (6) with cost 17, and the shortest
# path from a to f is a -> c -> b -> d -> f with cost 14.
SAMPLE_MATRIX = """\
0 4 1 0 0 0
4 0 2 5 0 0
1 2 0 8 9 0
0 5 8 0 3 6
0 0 9 3 0 7
0 0 0 6 7 0
"""


@pytest.fixture
def sample_matrix_text() -> str:
    """Fixture providing the sample adjacency matrix text."""
    return SAMPLE_MATRIX


@pytest.fixture
def sample_matrix_file(tmp_path):
    """Fixture providing the sample adjacency matrix as a .txt file."""
    path = tmp_path / "graph.txt"
    path.write_text(SAMPLE_MATRIX, encoding="utf-8")
    return path
