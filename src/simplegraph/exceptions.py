"""Exceptions for simplegraph."""

from __future__ import annotations

from typing import Any


class InvalidVertexError(TypeError, ValueError):
    """Vertex argument is not a non-negative integer.

    Raised by every graph operation that receives a vertex outside the
    vertex domain. Valid vertices that simply are not in the graph never
    raise; those are no-ops or empty results.

    Subclasses both TypeError (wrong kind of object) and ValueError
    (negative integer) so callers can catch whichever fits.

    Attributes:
        vertex: The rejected value
        message: Human-readable error message
    """

    def __init__(self, vertex: Any, message: str | None = None) -> None:
        self.vertex = vertex
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        if isinstance(self.vertex, int) and not isinstance(self.vertex, bool):
            problem = "Vertices must be >= 0"
        else:
            problem = f"Vertices must be int, got {type(self.vertex).__name__}"
        return (
            f"Invalid vertex: {self.vertex!r}\n\n"
            f"  -> {problem}\n\n"
            f"How to fix: Map your node labels to non-negative integers"
        )


class ConfigError(ValueError):
    """Graph configuration is invalid.

    Raised for an unknown vertex order or a malformed [tool.simplegraph]
    table in pyproject.toml.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class GraphIntegrityError(Exception):
    """Graph bookkeeping is inconsistent.

    Raised by validate_graph when an adjacency record disagrees with its
    neighbours or the edge count drifts. Indicates a bug, not bad input.

    Attributes:
        problems: One line per violated invariant
        message: Human-readable error message
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        self.message = "Graph integrity check failed:\n" + "\n".join(
            f"  -> {p}" for p in problems
        )
        super().__init__(self.message)
