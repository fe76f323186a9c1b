"""Structural integrity checks for adjacency-list graphs.

This module verifies that a Graph's label mapping and adjacency mapping
agree with each other and that no adjacency list points at a node that is
no longer part of the graph.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from src.graph.graph import Graph

logger = structlog.get_logger(__name__)


@dataclass
class IntegrityReport:
    """Report containing integrity check results for a graph.

    Attributes:
        is_valid: Whether the graph passed all checks
        errors: List of error messages
        missing_adjacency: Labels whose node has no adjacency list
        stray_adjacency: Labels of adjacency entries with no label mapping
        dangling_edges: (source, target) label pairs whose target is not a graph node
        mislabeled: Keys of the label mapping whose node carries a different label
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    missing_adjacency: set[str] = field(default_factory=set)
    stray_adjacency: set[str] = field(default_factory=set)
    dangling_edges: list[tuple[str, str]] = field(default_factory=list)
    mislabeled: set[str] = field(default_factory=set)

    def add_error(self, message: str) -> None:
        """Add an error message and mark the report as failed."""
        self.errors.append(message)
        self.is_valid = False
        logger.error("integrity_error", message=message)

    def summary(self) -> str:
        """Generate a human-readable summary of the report."""
        lines = [
            f"Integrity Status: {'PASS' if self.is_valid else 'FAIL'}",
            f"Errors: {len(self.errors)}",
            f"Missing Adjacency Lists: {len(self.missing_adjacency)}",
            f"Stray Adjacency Lists: {len(self.stray_adjacency)}",
            f"Dangling Edges: {len(self.dangling_edges)}",
            f"Mislabeled Nodes: {len(self.mislabeled)}",
        ]

        if self.errors:
            lines.append("\nErrors:")
            lines.extend(f"  - {error}" for error in self.errors)

        return "\n".join(lines)


class GraphValidator:
    """Checks that a graph's label and adjacency mappings are consistent."""

    def validate(self, graph: "Graph") -> IntegrityReport:
        """Check a graph and generate a report.

        Args:
            graph: The Graph to check

        Returns:
            IntegrityReport describing every inconsistency found
        """
        logger.info("starting_integrity_check", node_count=len(graph.nodes))

        report = IntegrityReport()
        known_nodes = set(graph.nodes.values())

        for label, node in graph.nodes.items():
            if node.label != label:
                report.mislabeled.add(label)
                report.add_error(f"Label {label!r} maps to node labeled {node.label!r}")

            if node not in graph.edges:
                report.missing_adjacency.add(label)
                report.add_error(f"Node {label!r} has no adjacency list")

        for node, adjacency in graph.edges.items():
            if node not in known_nodes:
                report.stray_adjacency.add(node.label)
                report.add_error(f"Adjacency list for unregistered node {node.label!r}")

            for neighbor in adjacency:
                if neighbor not in known_nodes:
                    report.dangling_edges.append((node.label, neighbor.label))
                    report.add_error(
                        f"Edge {node.label!r} -> {neighbor.label!r} targets a removed node",
                    )

        logger.info(
            "integrity_check_complete",
            is_valid=report.is_valid,
            error_count=len(report.errors),
        )

        return report
