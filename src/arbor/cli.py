"""Command Line Interface for arbor.

This module loads a graph and reports its minimum spanning tree and the
shortest path between two labels.

The CLI supports the following commands:
    - report: Print the spanning tree matrix and cost, then the shortest path
    - matrix: Print the adjacency matrix of the loaded graph

Graph input is either an adjacency matrix ``.txt`` file, a JSON graph
document given as a file path prefixed with '@', or an inline JSON string.

Example Usage:
    python -m arbor cli report data/graph.txt
    python -m arbor cli report data/graph.txt --seed 7 --source a --target f
    python -m arbor cli report @data/graph.json --start c
    python -m arbor cli matrix data/graph.txt
"""

import argparse
import logging
import sys
from typing import List, Optional

from arbor.core.constants import DEFAULT_SOURCE_LABEL, DEFAULT_TARGET_LABEL
from arbor.core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    ResourceNotFoundError,
    ValidationError,
)
from arbor.core.graph import Graph
from arbor.core.graph_algorithms import GraphAlgorithms
from arbor.loader import load_graph
from arbor.reporter import render_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Spanning tree and shortest path CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    report = subparsers.add_parser("report", help="Report spanning tree and shortest path")
    report.add_argument("input", help="Matrix .txt file, @file.json or JSON string")
    report.add_argument("--seed", type=int, help="Seed for choosing the spanning tree start")
    report.add_argument("--start", help="Label to start the spanning tree from")
    report.add_argument("--source", default=DEFAULT_SOURCE_LABEL, help="Shortest path source")
    report.add_argument("--target", default=DEFAULT_TARGET_LABEL, help="Shortest path target")

    matrix = subparsers.add_parser("matrix", help="Print the adjacency matrix of the graph")
    matrix.add_argument("input", help="Matrix .txt file, @file.json or JSON string")

    return parser


def check_endpoints(graph: Graph, source: str, target: str) -> None:
    """Ensure the shortest path endpoints exist.

    Raises:
        ConfigurationError: If either endpoint is missing from the graph
    """
    missing = [label for label in (source, target) if not graph.has_node(label)]
    if missing:
        raise ConfigurationError(f"shortest path endpoints missing from graph: {missing}")


def run_report(args: argparse.Namespace) -> str:
    """Load the graph and render the report for the parsed arguments."""
    graph = load_graph(args.input)
    check_endpoints(graph, args.source, args.target)

    tree = GraphAlgorithms.spanning_tree(graph, start=args.start, seed=args.seed)
    if tree is None:
        logger.warning("Graph has no spanning tree from the chosen start")
    path = GraphAlgorithms.shortest_path(graph, args.source, args.target)
    return render_report(tree, path)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    try:
        if args.command == "report":
            print(run_report(args), end="")
        elif args.command == "matrix":
            print(load_graph(args.input).render_adjacency_matrix(), end="")
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR
    except (ValidationError, ResourceNotFoundError, GraphOperationError, OSError) as e:
        print(f"Input error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
