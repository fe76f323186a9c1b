"""Graph module for labeled directed graphs.

This module provides an adjacency-list graph built on the linked list from
``src.linear`` with breadth-first and depth-first traversals, plus an
integrity checker for its internal mappings.
"""

from src.graph.graph import Graph, GraphNode
from src.graph.validator import GraphValidator, IntegrityReport

__all__ = ["Graph", "GraphNode", "GraphValidator", "IntegrityReport"]
