"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by the kind of argument that was rejected:
        1000-1099: Graph arguments
        1100-1199: Node arguments
        1200-1299: Node collection arguments
        1300-1399: Adjacency mapping arguments
    """

    # Graph arguments (1000-1099)
    GRAPH_REQUIRED = 1001
    GRAPH_TYPE_INVALID = 1002

    # Node arguments (1100-1199)
    NODE_REQUIRED = 1101
    NODE_UNHASHABLE = 1102

    # Node collections (1200-1299)
    NODES_REQUIRED = 1201
    NODES_NOT_ITERABLE = 1202

    # Adjacency mappings (1300-1399)
    MAPPING_REQUIRED = 1301
    SUCCESSORS_INVALID = 1302


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a
    caller to see which argument of which operation was rejected and why.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        operation: Name of the graph operation that rejected the argument
        argument_name: Argument name that caused error
        expected_type: Expected type for argument
        received_type: Actual type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    operation: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[NODE_REQUIRED]: Node argument 'source' must not be None
              = operation: Graph.add_edge
              = argument: source
              = help: Pass a hashable value other than None

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
