"""Graph algorithms over simplegraph.Graph.

Provides reachability, strongly connected components, circuit detection,
depth-first post-order and transposition. All traversals are iterative
with explicit stacks, so graph depth is bounded by memory rather than by
the interpreter's recursion limit.

Every function validates its arguments before doing any work and never
mutates the graph it is given.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterable, Iterator

from simplegraph.core.graph import Graph
from simplegraph.core.validation import require_graph, require_nodes

__all__ = [
    "find_all_connected",
    "find_circuit",
    "find_strongly_connected_components",
    "new_instance",
    "sort_post_order",
    "transpose",
]

logger = logging.getLogger(__name__)


def new_instance[V: Hashable]() -> Graph[V]:
    """Return a new empty graph."""
    return Graph()


def find_all_connected[V: Hashable](graph: Graph[V], starts: Iterable[V]) -> set[V]:
    """Find every node reachable from starts through one or more arcs.

    Start nodes are part of the result only if a path of length >= 1 leads
    back to one of them (a cycle or a self-loop). Start nodes missing from
    the graph contribute nothing.

    Args:
        graph: Graph to traverse
        starts: Nodes to start from. Any iterable is accepted.

    Returns:
        Set of reachable nodes

    Example:
        >>> graph = Graph.from_mapping({1: [2], 2: [3], 5: [2]})
        >>> sorted(find_all_connected(graph, {1}))
        [2, 3]
        >>> sorted(find_all_connected(graph, {3}))
        []

    Complexity:
        Time: O(V + E)
        Space: O(V)

    Raises:
        InvalidGraphArgumentError: If graph is not a Graph or starts is
            None or not iterable
    """
    require_graph(graph, "find_all_connected")
    seeds = require_nodes(starts, "find_all_connected", "starts")
    adjacency = graph.to_mapping()

    # Result is not pre-seeded: starts are only added when re-reached
    result: set[V] = set()
    frontier: deque[V] = deque(seed for seed in seeds if seed in adjacency)

    while frontier:
        node = frontier.popleft()
        for successor in adjacency[node]:
            if successor not in result:
                result.add(successor)
                frontier.append(successor)

    logger.debug("Found %d nodes reachable from %d start nodes", len(result), len(seeds))
    return result


def find_strongly_connected_components[V: Hashable](graph: Graph[V]) -> set[frozenset[V]]:
    """Partition the node set into strongly connected components.

    Implements Tarjan's algorithm iteratively with an explicit stack of
    (node, successor iterator) frames. Each node lands in exactly one
    component; nodes that are not on any cycle form singleton components.
    A self-loop never merges a node with other nodes.

    Args:
        graph: Graph to partition

    Returns:
        Set of components. Their union is graph.node_set() and they are
        pairwise disjoint.

    Example:
        >>> graph = Graph.from_mapping({1: [2], 2: [3], 3: [1, 4]})
        >>> sorted(sorted(c) for c in find_strongly_connected_components(graph))
        [[1, 2, 3], [4]]

    Complexity:
        Time: O(V + E)
        Space: O(V)

    Raises:
        InvalidGraphArgumentError: If graph is not a Graph
    """
    require_graph(graph, "find_strongly_connected_components")
    components = _tarjan(graph.to_mapping())
    logger.debug(
        "Partitioned %d nodes into %d strongly connected components",
        len(graph),
        len(components),
    )
    return components


def find_circuit[V: Hashable](graph: Graph[V]) -> set[frozenset[V]]:
    """Find the strongly connected components that contain a real cycle.

    A component qualifies when it has more than one node, or when its
    single node has an arc to itself.

    Args:
        graph: Graph to inspect

    Returns:
        Subset of find_strongly_connected_components(graph)

    Example:
        >>> graph = Graph.from_mapping({1: [2], 2: [2, 3]})
        >>> find_circuit(graph)
        {frozenset({2})}

    Raises:
        InvalidGraphArgumentError: If graph is not a Graph
    """
    require_graph(graph, "find_circuit")
    adjacency = graph.to_mapping()

    circuits: set[frozenset[V]] = set()
    for component in _tarjan(adjacency):
        if len(component) > 1:
            circuits.add(component)
            continue
        (node,) = component
        if node in adjacency[node]:
            circuits.add(component)

    logger.debug("Found %d circuits in graph with %d nodes", len(circuits), len(adjacency))
    return circuits


def sort_post_order[V: Hashable](graph: Graph[V]) -> list[V]:
    """List every node in depth-first post-order.

    A node is emitted only after all of its unvisited successors have been
    fully processed. Every node serves as a potential root, so nodes that
    are unreachable from the others are still covered. Nodes are marked
    visited before descending, so cycles and self-loops terminate and each
    node is emitted exactly once.

    The order among unvisited siblings follows graph iteration order and
    is not otherwise guaranteed. For a tree or DAG an ancestor always comes
    after its descendants; for a chain the output is the reversed chain.

    Args:
        graph: Graph to linearize

    Returns:
        List holding each node exactly once

    Example:
        >>> graph = Graph.from_mapping({1: [2], 2: [3], 3: [4]})
        >>> sort_post_order(graph)
        [4, 3, 2, 1]

    Complexity:
        Time: O(V + E)
        Space: O(V)

    Raises:
        InvalidGraphArgumentError: If graph is not a Graph
    """
    require_graph(graph, "sort_post_order")
    adjacency = graph.to_mapping()

    visited: set[V] = set()
    order: list[V] = []

    # Process each DFS tree of the forest
    for root in adjacency:
        if root in visited:
            continue

        visited.add(root)
        stack: list[tuple[V, Iterator[V]]] = [(root, iter(adjacency[root]))]

        while stack:
            node, successors = stack[-1]
            for successor in successors:
                if successor not in visited:
                    visited.add(successor)
                    stack.append((successor, iter(adjacency[successor])))
                    break
            else:
                # All successors processed
                stack.pop()
                order.append(node)

    logger.debug("Sorted %d nodes in post-order", len(order))
    return order


def transpose[V: Hashable](graph: Graph[V]) -> Graph[V]:
    """Build a new graph with every arc reversed.

    Isolated nodes and self-loops are preserved. The input graph is not
    modified, and transpose(transpose(graph)) == graph.

    Args:
        graph: Graph to reverse

    Returns:
        New graph with the same nodes and reversed arcs

    Example:
        >>> graph = Graph.from_mapping({1: [2], 3: []})
        >>> transpose(graph).to_mapping()
        {1: frozenset(), 2: frozenset({1}), 3: frozenset()}

    Raises:
        InvalidGraphArgumentError: If graph is not a Graph
    """
    require_graph(graph, "transpose")

    reversed_graph: Graph[V] = Graph()
    for vertex in graph:
        reversed_graph.add_node(vertex.node)
    for source, destination in graph.edges():
        reversed_graph.add_edge(destination, source)

    logger.debug(
        "Transposed graph: %d nodes, %d edges",
        len(reversed_graph),
        reversed_graph.edge_count(),
    )
    return reversed_graph


def _tarjan[V: Hashable](adjacency: dict[V, frozenset[V]]) -> set[frozenset[V]]:
    """Tarjan's strongly connected components over an adjacency snapshot."""
    index: dict[V, int] = {}
    lowlink: dict[V, int] = {}
    on_stack: set[V] = set()
    component_stack: list[V] = []
    components: set[frozenset[V]] = set()

    def enter(node: V) -> None:
        index[node] = lowlink[node] = len(index)
        component_stack.append(node)
        on_stack.add(node)

    for root in adjacency:
        if root in index:
            continue

        enter(root)
        work: list[tuple[V, Iterator[V]]] = [(root, iter(adjacency[root]))]

        while work:
            node, successors = work[-1]
            for successor in successors:
                if successor not in index:
                    enter(successor)
                    work.append((successor, iter(adjacency[successor])))
                    break
                if successor in on_stack:
                    lowlink[node] = min(lowlink[node], index[successor])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[node])

                if lowlink[node] == index[node]:
                    # node is the root of a component: pop it off
                    members: list[V] = []
                    while True:
                        member = component_stack.pop()
                        on_stack.discard(member)
                        members.append(member)
                        if member is node:
                            break
                    components.add(frozenset(members))

    return components
