"""Shared graph fixtures."""

import pytest

from simplegraph import Graph


@pytest.fixture
def path_graph():
    """1 -> 2 -> 3."""
    return Graph.from_edges([(1, 2), (2, 3)])


@pytest.fixture
def triangle():
    """1 -> 2, 2 -> 3, 1 -> 3."""
    return Graph.from_edges([(1, 2), (2, 3), (1, 3)])


@pytest.fixture
def mixed_graph():
    """A graph with a 2-cycle, a chain, a fan-in and one isolated vertex."""
    return Graph.from_edges(
        [(0, 1), (1, 0), (1, 2), (2, 3), (4, 3), (5, 3), (3, 6)],
        vertices=[9],
    )
