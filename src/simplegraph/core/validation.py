"""Argument guards shared by Graph and the analysis functions.

Every public operation validates its arguments up front and raises
InvalidGraphArgumentError before touching any state, so a failed call
never leaves a graph half-modified.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from simplegraph.diagnostics import ErrorTemplate, InvalidGraphArgumentError

if TYPE_CHECKING:
    from simplegraph.core.graph import Graph

__all__ = [
    "require_graph",
    "require_mapping",
    "require_node",
    "require_nodes",
    "require_successors",
]


def require_node(value: object, operation: str, argument_name: str) -> None:
    """Reject None and unhashable node values.

    Args:
        value: Candidate node
        operation: Name of the calling operation (for diagnostics)
        argument_name: Name of the parameter holding the value

    Raises:
        InvalidGraphArgumentError: If value is None or cannot be hashed
    """
    if value is None:
        raise InvalidGraphArgumentError(ErrorTemplate.node_required(operation, argument_name))
    try:
        hash(value)
    except TypeError:
        diagnostic = ErrorTemplate.node_unhashable(
            operation, argument_name, type(value).__name__
        )
        raise InvalidGraphArgumentError(diagnostic) from None


def require_graph(graph: object, operation: str) -> Graph[Any]:
    """Reject None and non-Graph values passed where a graph is required.

    Returns:
        The same object, narrowed to Graph
    """
    from simplegraph.core.graph import Graph  # noqa: PLC0415 - circular

    if graph is None:
        raise InvalidGraphArgumentError(ErrorTemplate.graph_required(operation))
    if not isinstance(graph, Graph):
        diagnostic = ErrorTemplate.graph_type_invalid(operation, type(graph).__name__)
        raise InvalidGraphArgumentError(diagnostic)
    return graph


def require_nodes(values: object, operation: str, argument_name: str) -> list[Hashable]:
    """Materialize a node collection argument.

    None elements are kept: they are never graph members, so lookups on
    them simply miss. Unhashable elements are rejected because they could
    not be looked up at all.

    Args:
        values: Candidate iterable of nodes
        operation: Name of the calling operation (for diagnostics)
        argument_name: Name of the parameter holding the collection

    Returns:
        The elements as a list, in iteration order

    Raises:
        InvalidGraphArgumentError: If values is None, not iterable, or holds
            an unhashable element
    """
    if values is None:
        raise InvalidGraphArgumentError(ErrorTemplate.nodes_required(operation, argument_name))
    if not isinstance(values, Iterable):
        diagnostic = ErrorTemplate.nodes_not_iterable(
            operation, argument_name, type(values).__name__
        )
        raise InvalidGraphArgumentError(diagnostic)

    nodes = list(values)
    for node in nodes:
        if node is not None:
            require_node(node, operation, argument_name)
    return nodes


def require_mapping(mapping: object, operation: str) -> Mapping[Any, Any]:
    """Reject None and non-mapping adjacency arguments."""
    if not isinstance(mapping, Mapping):
        diagnostic = ErrorTemplate.mapping_required(operation, type(mapping).__name__)
        raise InvalidGraphArgumentError(diagnostic)
    return mapping


def require_successors(values: object, operation: str) -> Iterable[Any]:
    """Reject adjacency values that are not collections of nodes.

    str, bytes and bytearray are refused even though they are iterable.
    """
    if isinstance(values, str | bytes | bytearray) or not isinstance(values, Iterable):
        diagnostic = ErrorTemplate.successors_invalid(operation, type(values).__name__)
        raise InvalidGraphArgumentError(diagnostic)
    return values
