"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from simplegraph.constants import PYTHON_DOCS_URL

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _HASHABLE_URL = f"{PYTHON_DOCS_URL}/glossary.html#term-hashable"
    _ITERABLE_URL = f"{PYTHON_DOCS_URL}/glossary.html#term-iterable"

    @staticmethod
    def graph_required(operation: str) -> Diagnostic:
        """Graph argument was None.

        Args:
            operation: Name of the rejecting operation

        Returns:
            Diagnostic for GRAPH_REQUIRED
        """
        msg = f"Graph argument of '{operation}' must not be None"
        return Diagnostic(
            code=DiagnosticCode.GRAPH_REQUIRED,
            message=msg,
            hint="Create a graph with new_instance() and pass it in",
            operation=operation,
            argument_name="graph",
            expected_type="Graph",
            received_type="NoneType",
        )

    @staticmethod
    def graph_type_invalid(operation: str, received_type: str) -> Diagnostic:
        """Graph argument was not a Graph instance.

        Args:
            operation: Name of the rejecting operation
            received_type: Type name of the rejected value

        Returns:
            Diagnostic for GRAPH_TYPE_INVALID
        """
        msg = f"Graph argument of '{operation}' must be a Graph, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.GRAPH_TYPE_INVALID,
            message=msg,
            hint="Wrap plain adjacency mappings with Graph.from_mapping()",
            operation=operation,
            argument_name="graph",
            expected_type="Graph",
            received_type=received_type,
        )

    @staticmethod
    def node_required(operation: str, argument_name: str) -> Diagnostic:
        """Node argument was None.

        Args:
            operation: Name of the rejecting operation
            argument_name: Parameter that held None

        Returns:
            Diagnostic for NODE_REQUIRED
        """
        msg = f"Node argument '{argument_name}' of '{operation}' must not be None"
        return Diagnostic(
            code=DiagnosticCode.NODE_REQUIRED,
            message=msg,
            hint="Pass a hashable value other than None",
            operation=operation,
            argument_name=argument_name,
            expected_type="hashable value",
            received_type="NoneType",
        )

    @staticmethod
    def node_unhashable(operation: str, argument_name: str, received_type: str) -> Diagnostic:
        """Node argument could not be hashed.

        Args:
            operation: Name of the rejecting operation
            argument_name: Parameter that held the value
            received_type: Type name of the rejected value

        Returns:
            Diagnostic for NODE_UNHASHABLE
        """
        msg = f"Node argument '{argument_name}' of '{operation}' is not hashable: {received_type}"
        return Diagnostic(
            code=DiagnosticCode.NODE_UNHASHABLE,
            message=msg,
            hint="Use an immutable value such as a tuple or frozenset",
            help_url=ErrorTemplate._HASHABLE_URL,
            operation=operation,
            argument_name=argument_name,
            expected_type="hashable value",
            received_type=received_type,
        )

    @staticmethod
    def nodes_required(operation: str, argument_name: str) -> Diagnostic:
        """Node collection argument was None.

        Args:
            operation: Name of the rejecting operation
            argument_name: Parameter that held None

        Returns:
            Diagnostic for NODES_REQUIRED
        """
        msg = f"Node collection '{argument_name}' of '{operation}' must not be None"
        return Diagnostic(
            code=DiagnosticCode.NODES_REQUIRED,
            message=msg,
            hint="Pass an empty collection to select no nodes",
            operation=operation,
            argument_name=argument_name,
            expected_type="iterable of nodes",
            received_type="NoneType",
        )

    @staticmethod
    def nodes_not_iterable(operation: str, argument_name: str, received_type: str) -> Diagnostic:
        """Node collection argument was not iterable.

        Args:
            operation: Name of the rejecting operation
            argument_name: Parameter that held the value
            received_type: Type name of the rejected value

        Returns:
            Diagnostic for NODES_NOT_ITERABLE
        """
        msg = (
            f"Node collection '{argument_name}' of '{operation}' "
            f"must be iterable, got {received_type}"
        )
        return Diagnostic(
            code=DiagnosticCode.NODES_NOT_ITERABLE,
            message=msg,
            hint="Wrap a single node in a set, e.g. {node}",
            help_url=ErrorTemplate._ITERABLE_URL,
            operation=operation,
            argument_name=argument_name,
            expected_type="iterable of nodes",
            received_type=received_type,
        )

    @staticmethod
    def mapping_required(operation: str, received_type: str) -> Diagnostic:
        """Adjacency mapping argument was None or not a mapping.

        Args:
            operation: Name of the rejecting operation
            received_type: Type name of the rejected value

        Returns:
            Diagnostic for MAPPING_REQUIRED
        """
        msg = f"Adjacency argument of '{operation}' must be a mapping, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.MAPPING_REQUIRED,
            message=msg,
            hint="Pass a mapping from each node to an iterable of its successors",
            operation=operation,
            argument_name="mapping",
            expected_type="Mapping[node, Iterable[node]]",
            received_type=received_type,
        )

    @staticmethod
    def successors_invalid(operation: str, received_type: str) -> Diagnostic:
        """Adjacency mapping value was not a collection of successors.

        Strings and bytes are iterable but would be split into single
        characters, so they are rejected along with non-iterables.

        Args:
            operation: Name of the rejecting operation
            received_type: Type name of the rejected value

        Returns:
            Diagnostic for SUCCESSORS_INVALID
        """
        msg = (
            f"Successors in the adjacency argument of '{operation}' "
            f"must be a collection of nodes, got {received_type}"
        )
        return Diagnostic(
            code=DiagnosticCode.SUCCESSORS_INVALID,
            message=msg,
            hint="Wrap a single successor in a collection, e.g. {'a': ['b']}",
            help_url=ErrorTemplate._ITERABLE_URL,
            operation=operation,
            argument_name="mapping",
            expected_type="iterable of nodes",
            received_type=received_type,
        )
