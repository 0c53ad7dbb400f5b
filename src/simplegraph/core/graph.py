"""Mutable directed graph over hashable nodes.

A Graph owns a single adjacency dictionary: its keys are the node set and
its values are the successor sets. Every node referenced by an arc is
therefore always a member of the node set.

Thread Safety:
    Graphs are NOT thread-safe. Concurrent mutation must be serialized by
    the caller. Concurrent reads of a graph nobody mutates are safe.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass

from simplegraph.constants import MAX_REPR_NODES
from simplegraph.core.validation import require_mapping, require_node, require_successors

__all__ = ["Graph", "Vertex"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Vertex[V: Hashable]:
    """A node together with its direct successors at the time of iteration.

    Attributes:
        node: The node itself
        connected: Nodes reachable from node through exactly one arc
    """

    node: V
    connected: frozenset[V]


class Graph[V: Hashable]:
    """Directed, unweighted graph with optional self-loops.

    Re-adding a node or an arc is a no-op. Two graphs compare equal when
    they have the same nodes and the same arcs; like other mutable
    containers, graphs are unhashable.

    Examples:
        >>> graph: Graph[int] = Graph()
        >>> graph.add_edge(1, 2)
        >>> graph.add_node(3)
        >>> sorted(graph.node_set())
        [1, 2, 3]
        >>> graph.is_connected(1, 2), graph.is_connected(2, 1)
        (True, False)
    """

    __slots__ = ("_adjacency",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._adjacency: dict[V, set[V]] = {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[V, Iterable[V]]) -> Graph[V]:
        """Build a graph from an adjacency mapping.

        Every key becomes a node, even when it has no successors.

        Args:
            mapping: Mapping from node to an iterable of its successors.
                     Example: {"a": {"b", "c"}, "b": {"c"}, "c": set()}

        Returns:
            New graph holding exactly those nodes and arcs

        Raises:
            InvalidGraphArgumentError: If mapping is not a mapping, maps a
                node to a string or non-iterable, or holds
                None/unhashable nodes
        """
        require_mapping(mapping, "Graph.from_mapping")
        graph: Graph[V] = cls()
        for source, destinations in mapping.items():
            graph.add_node(source)
            for destination in require_successors(destinations, "Graph.from_mapping"):
                graph.add_edge(source, destination)
        logger.debug(
            "Built graph from mapping: %d nodes, %d edges",
            len(graph._adjacency),
            graph.edge_count(),
        )
        return graph

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(self, node: V) -> None:
        """Add node to the graph. No-op if it is already present.

        Raises:
            InvalidGraphArgumentError: If node is None or unhashable
        """
        require_node(node, "Graph.add_node", "node")
        self._adjacency.setdefault(node, set())

    def add_edge(self, source: V, destination: V) -> None:
        """Add the arc source -> destination, adding both endpoints as nodes.

        source == destination creates a self-loop. Adding an existing arc
        is a no-op.

        Raises:
            InvalidGraphArgumentError: If either endpoint is None or unhashable
        """
        require_node(source, "Graph.add_edge", "source")
        require_node(destination, "Graph.add_edge", "destination")
        self._adjacency.setdefault(destination, set())
        self._adjacency.setdefault(source, set()).add(destination)

    def remove_edge(self, source: V, destination: V) -> None:
        """Remove the arc source -> destination. Both endpoints stay nodes."""
        if self.contains(source) and self.contains(destination):
            self._adjacency[source].discard(destination)

    def remove_node(self, node: V) -> None:
        """Remove node and every arc that starts or ends at it."""
        if not self.contains(node):
            return
        del self._adjacency[node]
        for successors in self._adjacency.values():
            successors.discard(node)

    def clear(self) -> None:
        """Remove all nodes and arcs."""
        logger.debug("Clearing graph with %d nodes", len(self._adjacency))
        self._adjacency.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def node_set(self) -> set[V]:
        """Return a copy of the node set.

        Mutating the returned set does not affect the graph.
        """
        return set(self._adjacency)

    def contains(self, node: object) -> bool:
        """Return True if node is a member of this graph."""
        try:
            return node in self._adjacency
        except TypeError:
            # Unhashable values can never be members
            return False

    def is_connected(self, source: object, destination: object) -> bool:
        """Return True iff the direct arc source -> destination exists.

        This is adjacency, not reachability. Absent nodes give False.
        """
        try:
            successors = self._adjacency.get(source)  # type: ignore[call-overload]
            return successors is not None and destination in successors
        except TypeError:
            return False

    def get_connected(self, node: object) -> frozenset[V]:
        """Return the direct successors of node (empty if node is absent)."""
        try:
            successors = self._adjacency.get(node)  # type: ignore[call-overload]
        except TypeError:
            return frozenset()
        return frozenset(successors) if successors else frozenset()

    def edges(self) -> Iterator[tuple[V, V]]:
        """Iterate over every arc as a (source, destination) pair."""
        for source, successors in self._adjacency.items():
            for destination in successors:
                yield source, destination

    def edge_count(self) -> int:
        """Return the number of arcs, self-loops included."""
        return sum(len(successors) for successors in self._adjacency.values())

    def copy(self) -> Graph[V]:
        """Return an independent copy sharing the node objects."""
        duplicate: Graph[V] = type(self)()
        duplicate._adjacency = {
            node: set(successors) for node, successors in self._adjacency.items()
        }
        return duplicate

    def to_mapping(self) -> dict[V, frozenset[V]]:
        """Return an adjacency snapshot; every node appears as a key."""
        return {node: frozenset(successors) for node, successors in self._adjacency.items()}

    # ------------------------------------------------------------------
    # Protocols
    # ------------------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return self.contains(node)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Vertex[V]]:
        for node, successors in self._adjacency.items():
            yield Vertex(node, frozenset(successors))

    def __eq__(self, other: object) -> bool:
        """Structural equality: same node set and same arcs."""
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> graph = Graph.from_mapping({1: [2]})
            >>> repr(graph)
            'Graph(nodes=2, edges=1, preview=[1, 2])'
        """
        preview = list(self._adjacency)[:MAX_REPR_NODES]
        suffix = ", ..." if len(self._adjacency) > MAX_REPR_NODES else ""
        rendered = ", ".join(repr(node) for node in preview)
        return (
            f"Graph(nodes={len(self._adjacency)}, "
            f"edges={self.edge_count()}, "
            f"preview=[{rendered}{suffix}])"
        )
