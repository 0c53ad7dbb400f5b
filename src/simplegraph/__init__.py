"""simplegraph - Generic directed graphs with classical graph algorithms.

Public API:
    Graph - Mutable directed graph over hashable nodes
    Vertex - Node plus its direct successors, yielded by iterating a Graph
    new_instance - Create an empty Graph
    find_all_connected - Nodes reachable through one or more arcs
    find_strongly_connected_components - Partition nodes into SCCs
    find_circuit - SCCs that contain an actual cycle
    sort_post_order - Depth-first post-order of all nodes
    transpose - New graph with every arc reversed

Exceptions:
    GraphError - Base exception class
    InvalidGraphArgumentError - Missing or unusable graph, node, or collection argument

Submodules:
    simplegraph.core - Graph data structure and argument guards
    simplegraph.analysis - Graph algorithms
    simplegraph.diagnostics - Error codes, templates and formatting
"""

from .analysis import (
    find_all_connected,
    find_circuit,
    find_strongly_connected_components,
    new_instance,
    sort_post_order,
    transpose,
)
from .core import Graph, Vertex
from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    GraphError,
    InvalidGraphArgumentError,
    OutputFormat,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("simplegraph")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "Graph",
    "GraphError",
    "InvalidGraphArgumentError",
    "OutputFormat",
    "Vertex",
    "__version__",
    "find_all_connected",
    "find_circuit",
    "find_strongly_connected_components",
    "new_instance",
    "sort_post_order",
    "transpose",
]
