"""Directed graph over string labels using adjacency lists.

    +----------------+-----------+-----------------+
    | Operation      | Matrix    | Adjacency list  |
    +================+===========+=================+
    | Space          | O(v^2)    | O(v + e)        |
    | Add edge       | O(1)      | O(1)            |
    | Remove edge    | O(1)      | O(k)            |
    | Find neighbors | O(v)      | O(k)            |
    | Add node       | O(v^2)    | O(1)            |
    | Remove node    | O(v^2)    | O(v + e)        |
    +----------------+-----------+-----------------+

    v = nodes, e = edges, k = length of one adjacency list
"""

import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

import structlog

from src.errors import UnknownNodeError
from src.linear.linked_list import LinkedList

logger = structlog.get_logger(__name__)

REPORT_SEPARATOR = "#" * 29


@dataclass(frozen=True, eq=False)
class GraphNode:
    """A labeled graph vertex.

    Nodes compare and hash by identity; the graph guarantees that one label
    maps to exactly one node object.
    """

    label: str

    def __str__(self) -> str:
        return self.label


class Graph:
    """Directed graph with one linked adjacency list per node.

    Duplicate edges are allowed and kept in insertion order. Traversals
    follow adjacency-list order and return the visited labels.

    Thread-safety:
        This class is NOT thread-safe. If concurrent access is required,
        protect all method calls with external synchronization.

    Example:
        >>> graph = Graph()
        >>> graph.add_node("A")
        >>> graph.add_node("B")
        >>> graph.add_edge("A", "B")
        >>> graph.traverse_breadth_first("A")
        ['A', 'B']
    """

    def __init__(self):
        """Initialize an empty graph."""
        self.nodes: dict[str, GraphNode] = {}
        self.edges: dict[GraphNode, LinkedList[GraphNode]] = {}

    def add_node(self, label: str) -> None:
        """Add a node for ``label`` unless one already exists.

        Re-adding an existing label keeps the original node and its edges.
        """
        if label in self.nodes:
            logger.debug("node_already_present", label=label)
            return

        node = GraphNode(label)
        self.nodes[label] = node
        self.edges[node] = LinkedList()

        logger.debug("node_added", label=label, node_count=len(self.nodes))

    def add_edge(self, source: str, target: str) -> None:
        """Append a directed edge from ``source`` to ``target``.

        Raises:
            UnknownNodeError: If either label has not been added
        """
        from_node = self._require_node(source)
        to_node = self._require_node(target)

        self.edges[from_node].add_last(to_node)

        logger.debug("edge_added", source=source, target=target)

    def remove_node(self, label: str) -> None:
        """Remove a node together with every edge that points at it.

        Raises:
            UnknownNodeError: If the label has not been added
        """
        node = self._require_node(label)

        removed_edges = 0
        for adjacency in self.edges.values():
            while adjacency.remove(node):
                removed_edges += 1

        del self.edges[node]
        del self.nodes[label]

        logger.debug(
            "node_removed",
            label=label,
            incoming_edges_removed=removed_edges,
            node_count=len(self.nodes),
        )

    def remove_edge(self, source: str, target: str) -> None:
        """Remove one edge from ``source`` to ``target``.

        Unknown labels are ignored, so this never raises.
        """
        from_node = self.nodes.get(source)
        to_node = self.nodes.get(target)
        if from_node is None or to_node is None:
            logger.debug("remove_edge_ignored_unknown_node", source=source, target=target)
            return

        removed = self.edges[from_node].remove(to_node)

        logger.debug("edge_removed", source=source, target=target, removed=removed)

    def has_node(self, label: str) -> bool:
        """Return True if ``label`` names a node in the graph."""
        return label in self.nodes

    def neighbors(self, label: str) -> list[str]:
        """Return the labels adjacent to ``label`` in adjacency order.

        Raises:
            UnknownNodeError: If the label has not been added
        """
        node = self._require_node(label)
        return [neighbor.label for neighbor in self.edges[node]]

    @property
    def labels(self) -> list[str]:
        """Node labels in insertion order."""
        return list(self.nodes)

    @property
    def edge_count(self) -> int:
        """Total number of edges, counting duplicates."""
        return sum(len(adjacency) for adjacency in self.edges.values())

    def render(self) -> str:
        """Render each node and its adjacency list as a text report."""
        lines = [REPORT_SEPARATOR]
        lines.extend(
            f"{node.label} \tis connected with {self.edges[node]}" for node in self.nodes.values()
        )
        return "\n".join(lines)

    def print(self, stream: TextIO | None = None) -> None:
        """Write the adjacency report to ``stream`` (stdout by default)."""
        out = stream if stream is not None else sys.stdout
        out.write(self.render() + "\n\n")

    def traverse_breadth_first(self, start: str) -> list[str]:
        """Breadth-first traversal from ``start``.

        Neighbors are queued in adjacency-list order and each label is
        emitted the first time its node is dequeued.

        Args:
            start: Label of the starting node

        Returns:
            Labels in visiting order; empty if ``start`` is unknown
        """
        node = self.nodes.get(start)
        if node is None:
            logger.debug("traversal_start_unknown", strategy="breadth_first", start=start)
            return []

        # Dict keys keep insertion order, so this doubles as the output
        visited: dict[GraphNode, None] = {}
        queue: deque[GraphNode] = deque([node])

        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited[current] = None

            for neighbor in self.edges[current]:
                if neighbor not in visited:
                    queue.append(neighbor)

        order = [visited_node.label for visited_node in visited]
        logger.debug("traversal_completed", strategy="breadth_first", start=start, order=order)
        return order

    def traverse_depth_first_recursive(self, start: str) -> list[str]:
        """Pre-order depth-first traversal from ``start``.

        Emits a node, then descends into each unvisited neighbor in adjacency
        order before moving to the next one, exactly like the recursive
        formulation. A stack of neighbor iterators replaces the call stack so
        long chains do not hit the interpreter recursion limit.

        Args:
            start: Label of the starting node

        Returns:
            Labels in visiting order; empty if ``start`` is unknown
        """
        node = self.nodes.get(start)
        if node is None:
            logger.debug("traversal_start_unknown", strategy="depth_first_recursive", start=start)
            return []

        visited = {node}
        order = [node.label]
        pending: list[Iterator[GraphNode]] = [iter(self.edges[node])]

        while pending:
            for neighbor in pending[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor.label)
                    pending.append(iter(self.edges[neighbor]))
                    break
            else:
                pending.pop()

        logger.debug(
            "traversal_completed",
            strategy="depth_first_recursive",
            start=start,
            order=order,
        )
        return order

    def traverse_depth_first_iterative(self, start: str) -> list[str]:
        """Depth-first traversal from ``start`` using an explicit stack.

        Unvisited neighbors are pushed in adjacency order and therefore popped
        in reverse, so for ``A -> [B, C]`` this visits C's branch before B.
        The order differs from :meth:`traverse_depth_first_recursive`.

        Args:
            start: Label of the starting node

        Returns:
            Labels in visiting order; empty if ``start`` is unknown
        """
        node = self.nodes.get(start)
        if node is None:
            logger.debug("traversal_start_unknown", strategy="depth_first_iterative", start=start)
            return []

        stack = [node]
        visited: set[GraphNode] = set()
        order: list[str] = []

        while stack:
            current = stack.pop()
            if current in visited:
                continue

            order.append(current.label)
            visited.add(current)

            stack.extend(neighbor for neighbor in self.edges[current] if neighbor not in visited)

        logger.debug(
            "traversal_completed",
            strategy="depth_first_iterative",
            start=start,
            order=order,
        )
        return order

    def _require_node(self, label: str) -> GraphNode:
        node = self.nodes.get(label)
        if node is None:
            logger.warning("unknown_node_referenced", label=label)
            raise UnknownNodeError(label)
        return node

    def __contains__(self, label: object) -> bool:
        return label in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        return self.render()
