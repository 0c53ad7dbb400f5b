"""Graph exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class GraphError(Exception):
    """Base exception for all simplegraph errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GraphError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidGraphArgumentError(GraphError, TypeError):
    """A required graph, node, or collection argument was missing or unusable.

    Raised synchronously before an operation does any work. Graph shapes
    (cycles, self-loops, disconnected parts, empty graphs) never raise it.

    Also a TypeError, so callers catching the builtin keep working.
    """
