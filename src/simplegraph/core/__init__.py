"""Core graph data structure and argument guards.

Python 3.13+.
"""

from .graph import Graph, Vertex

__all__ = [
    "Graph",
    "Vertex",
]
