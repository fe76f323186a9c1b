#!/usr/bin/env python3
"""Main Entry Point and CLI Integration.

Loads a configuration file describing a list of integers and a directed
graph, builds both structures, and prints the list operations, the graph's
adjacency report and its three traversal orders.
"""

import argparse
import sys
from typing import TextIO

import structlog

from src.config import GraphConfig, StructuresConfig
from src.errors import StructureError
from src.graph.graph import Graph
from src.graph.validator import GraphValidator
from src.linear.linked_list import LinkedList
from src.log_config import bind_context, clear_context, configure_logging

logger = structlog.get_logger(__name__)


def build_linked_list(values: list[int]) -> LinkedList[int]:
    """Build a linked list by appending values in order.

    Args:
        values: Integers to append

    Returns:
        The populated LinkedList
    """
    numbers: LinkedList[int] = LinkedList(*values)
    logger.info("linked_list_built", size=len(numbers))
    return numbers


def build_graph(graph_config: GraphConfig) -> Graph:
    """Build a graph from configured nodes and edges.

    Args:
        graph_config: Node labels and edges to add

    Returns:
        The populated Graph

    Raises:
        UnknownNodeError: If an edge references a label that is not a node
    """
    graph = Graph()
    for label in graph_config.nodes:
        graph.add_node(label)

    for edge in graph_config.edges:
        graph.add_edge(edge.source, edge.target)

    report = GraphValidator().validate(graph)
    if not report.is_valid:
        logger.error("graph_integrity_failed", summary=report.summary())

    logger.info("graph_built", node_count=len(graph), edge_count=graph.edge_count)
    return graph


def report_linked_list(numbers: LinkedList[int], kth: int, out: TextIO) -> None:
    """Write the list, its k-th value from the end and its reversal."""
    out.write(f"List: {numbers}\n")

    if numbers.is_empty():
        return

    if kth <= len(numbers):
        out.write(f"{kth} from end: {numbers.get_kth_from_end(kth)}\n")
    else:
        logger.warning("kth_from_end_skipped", k=kth, size=len(numbers))

    numbers.reverse()
    out.write(f"Reversed: {numbers}\n")


def report_graph(graph: Graph, start: str | None, out: TextIO) -> None:
    """Write the adjacency report and the traversal orders from ``start``."""
    graph.print(out)

    if start is None:
        return

    traversals = (
        ("Breadth-first", graph.traverse_breadth_first),
        ("Depth-first (recursive)", graph.traverse_depth_first_recursive),
        ("Depth-first (iterative)", graph.traverse_depth_first_iterative),
    )
    for name, traverse in traversals:
        order = traverse(start)
        out.write(f"{name} from {start}: {' -> '.join(order)}\n")


def run(config: StructuresConfig, start: str | None = None, out: TextIO | None = None) -> int:
    """Build and report both structures described by ``config``.

    Args:
        config: Loaded configuration
        start: Traversal start label overriding the configured one
        out: Stream receiving the report (stdout by default)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    out = out if out is not None else sys.stdout

    for warning in config.validate_config():
        logger.warning("configuration_warning", message=warning)

    try:
        numbers = build_linked_list(config.linked_list.values)
        report_linked_list(numbers, config.linked_list.kth_from_end, out)

        graph = build_graph(config.graph)
        report_graph(graph, start or config.graph.start_label, out)
    except StructureError as e:
        logger.exception("structure_operation_failed", error=str(e))
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)
    configure_logging(args.log_level, json_logs=args.json_logs)
    bind_context(config_file=args.config)

    try:
        config = StructuresConfig.from_yaml(args.config)

        # CLI flags override the configured level but not the renderer
        level = args.log_level if args.level_from_cli else config.logging.level
        configure_logging(level, json_logs=args.json_logs or config.logging.json_logs)

        return run(config, start=args.start)

    except FileNotFoundError as e:
        logger.exception("configuration_file_not_found", error=str(e))
        return 1

    except ValueError as e:
        logger.exception("configuration_validation_error", error=str(e))
        return 1

    finally:
        clear_context()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Build a linked list and an adjacency-list graph and report on them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Basic usage
  python main.py --config config.yaml

  # Traverse from a different node
  python main.py --config config.yaml --start C

  # Debug mode with detailed logging
  python main.py --config config.yaml --debug
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default="config.yaml",
        help="Path to configuration YAML file (default: config.yaml)",
    )

    parser.add_argument(
        "-s",
        "--start",
        type=str,
        default=None,
        help="Label to start traversals from (default: configured start)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (INFO level)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output (DEBUG level)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Render log entries as JSON",
    )

    args = parser.parse_args(argv)

    if args.debug:
        args.log_level = "DEBUG"
    elif args.verbose:
        args.log_level = "INFO"
    else:
        args.log_level = "WARNING"
    args.level_from_cli = args.debug or args.verbose

    return args


if __name__ == "__main__":
    sys.exit(main())
