"""pytest-benchmark configuration for simplegraph benchmarks.

Configures benchmark defaults and result metadata.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from simplegraph import Graph


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add simplegraph metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "simplegraph"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def layered_graph() -> Graph[int]:
    """10 layers of 100 nodes; each node links to 3 nodes of the next layer
    and every 10th node links back two layers to create cycles."""
    graph: Graph[int] = Graph()
    width, depth = 100, 10
    for layer in range(depth):
        for offset in range(width):
            node = layer * width + offset
            graph.add_node(node)
            if layer + 1 < depth:
                for step in (0, 1, 2):
                    graph.add_edge(node, (layer + 1) * width + (offset + step) % width)
            if layer >= 2 and offset % 10 == 0:
                graph.add_edge(node, (layer - 2) * width + offset)
    return graph


@pytest.fixture(scope="session")
def long_chain() -> Graph[int]:
    """A 10,000-node simple path."""
    graph: Graph[int] = Graph()
    graph.add_node(0)
    for node in range(9_999):
        graph.add_edge(node, node + 1)
    return graph
