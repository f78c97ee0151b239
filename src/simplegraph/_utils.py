"""Utility functions for simplegraph."""

from __future__ import annotations

from typing import Any

from simplegraph.exceptions import InvalidVertexError


def check_vertex(value: Any) -> int:
    """Validate a vertex argument and return it.

    Args:
        value: Candidate vertex

    Returns:
        The same value, known to be a non-negative int

    Raises:
        InvalidVertexError: If value is not an int, is a bool, or is negative

    Examples:
        >>> check_vertex(3)
        3
        >>> check_vertex(0)
        0
    """
    # bool is an int subclass but True/False are not vertex ids
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidVertexError(value)
    return value


def check_edge(u: Any, v: Any) -> tuple[int, int]:
    """Validate both endpoints of an edge."""
    return check_vertex(u), check_vertex(v)
