"""Plain-text rendering of spanning tree and shortest path results."""

from typing import Any, Mapping, Optional

from arbor.core.constants import PATH_SEPARATOR
from arbor.core.graph import Graph
from arbor.core.types import is_numeric_weight

SPANNING_TREE_TITLE = "Minimum Spanning Tree"
SHORTEST_PATH_TITLE = "Shortest Path"


def _heading(title: str) -> str:
    return f"{title}\n{'-' * len(title)}\n"


def _format_cost(cost: Any) -> str:
    return f"Cost: {float(cost)}\n"


def path_cost(path: Mapping[str, Any]) -> float:
    """Sum the numeric step weights of a shortest path result."""
    return float(sum(weight for weight in path.values() if is_numeric_weight(weight)))


def format_spanning_tree(tree: Optional[Graph]) -> str:
    """Render a spanning tree as its adjacency matrix followed by its cost."""
    if tree is None:
        return _heading(SPANNING_TREE_TITLE) + "No spanning tree exists\n"
    return _heading(SPANNING_TREE_TITLE) + tree.render_adjacency_matrix() + _format_cost(tree.cost())


def format_shortest_path(path: Optional[Mapping[str, Any]]) -> str:
    """Render a shortest path as its labels joined by arrows followed by its cost."""
    if path is None:
        return _heading(SHORTEST_PATH_TITLE) + "No path exists\n"
    route = PATH_SEPARATOR.join(path)
    return _heading(SHORTEST_PATH_TITLE) + f"{route}\n" + _format_cost(path_cost(path))


def render_report(tree: Optional[Graph], path: Optional[Mapping[str, Any]]) -> str:
    """Render both results, separated by a blank line."""
    return format_spanning_tree(tree) + "\n" + format_shortest_path(path)
