"""Tests for graph/validation.py - integrity checks."""

import pytest

from simplegraph import Graph, GraphIntegrityError, validate_graph


class TestValidateGraph:
    """Test validate_graph() on healthy and corrupted graphs."""

    def test_healthy_graphs_pass(self, mixed_graph):
        """Graphs built through the public API always validate."""
        validate_graph(Graph())
        validate_graph(mixed_graph)
        mixed_graph.absorb(3, 1)
        mixed_graph.remove_vertex(6)
        validate_graph(mixed_graph)

    def test_missing_in_link(self):
        """A one-sided edge is reported."""
        g = Graph.from_edges([(1, 2)])
        del g._index.lookup(2).in_[1]

        with pytest.raises(GraphIntegrityError, match="missing from in-neighbours of 2"):
            validate_graph(g)

    def test_dangling_target(self):
        """An edge to an erased vertex is reported."""
        g = Graph.from_edges([(1, 2)])
        g._index.erase(2)

        with pytest.raises(GraphIntegrityError, match="points at a missing vertex"):
            validate_graph(g)

    def test_self_loop(self):
        """A stored self-loop is reported."""
        g = Graph()
        record = g._index.ensure(1)
        record.out[1] = None
        record.in_[1] = None
        g._num_edges = 1

        with pytest.raises(GraphIntegrityError, match="its own neighbour"):
            validate_graph(g)

    def test_edge_count_drift(self):
        """A stale edge counter is reported."""
        g = Graph.from_edges([(1, 2), (2, 3)])
        g._num_edges = 5

        with pytest.raises(GraphIntegrityError) as exc_info:
            validate_graph(g)
        assert exc_info.value.problems == [
            "edge count is 5 but out-neighbour sets hold 2"
        ]

    def test_all_problems_collected(self):
        """Every violation is listed, not just the first."""
        g = Graph.from_edges([(1, 2)])
        del g._index.lookup(2).in_[1]
        g._num_edges = 3

        with pytest.raises(GraphIntegrityError) as exc_info:
            validate_graph(g)
        assert len(exc_info.value.problems) == 2
