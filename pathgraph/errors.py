"""Exception types raised by pathgraph.

An unreachable target is not an error: searches return ``None`` instead.
"""


class PathGraphError(Exception):
    """Base exception for pathgraph failures."""


class DuplicateVertexError(PathGraphError, ValueError):
    """Raised when a vertex payload equals one already stored in the graph."""


class NegativeWeightError(PathGraphError, ValueError):
    """Raised when a search is about to traverse an edge with negative weight."""


class SearchLimitExceededError(PathGraphError, RuntimeError):
    """Raised when a search expands more tracks than its configured budget."""
