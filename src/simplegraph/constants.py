"""Shared constants for simplegraph.

This module provides centralized configuration constants used across the
core and analysis packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Display limits: Bounds for human-readable representations
- Documentation: Links embedded in diagnostics

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MAX_REPR_NODES",
    "PYTHON_DOCS_URL",
]

# ============================================================================
# DISPLAY LIMITS
# ============================================================================

# Maximum nodes listed in Graph.__repr__ before the preview is truncated.
# Large graphs would otherwise flood logs and debugger output.
MAX_REPR_NODES: int = 8

# ============================================================================
# DOCUMENTATION
# ============================================================================

# Base URL for help links in argument diagnostics (hashability, iterables).
PYTHON_DOCS_URL: str = "https://docs.python.org/3"
