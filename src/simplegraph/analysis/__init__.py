"""Graph algorithms for simplegraph.Graph.

Provides reachability, strongly connected component partitioning, circuit
detection, depth-first post-order and transposition.

Python 3.13+.
"""

from .graph import (
    find_all_connected,
    find_circuit,
    find_strongly_connected_components,
    new_instance,
    sort_post_order,
    transpose,
)

__all__ = [
    "find_all_connected",
    "find_circuit",
    "find_strongly_connected_components",
    "new_instance",
    "sort_post_order",
    "transpose",
]
