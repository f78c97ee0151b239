"""Structural integrity checks for Graph.

Public operations keep these invariants on their own; validate_graph is
for tests and for code that reaches into a graph's internals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from simplegraph.exceptions import GraphIntegrityError

if TYPE_CHECKING:
    from simplegraph.graph.core import Graph
    from simplegraph.graph.index import VertexIndex


def validate_graph(graph: Graph) -> None:
    """Check every adjacency invariant of ``graph``.

    Raises:
        GraphIntegrityError: Listing every violation found
    """
    index = graph._index
    problems: list[str] = []
    problems.extend(_check_no_self_loops(index))
    problems.extend(_check_symmetric_links(index))
    problems.extend(_check_edge_count(index, graph.num_edges()))
    if problems:
        raise GraphIntegrityError(problems)


def _check_no_self_loops(index: VertexIndex) -> list[str]:
    problems = []
    for v in index.snapshot():
        record = index.lookup(v)
        if v in record.out or v in record.in_:
            problems.append(f"vertex {v} is its own neighbour")
    return problems


def _check_symmetric_links(index: VertexIndex) -> list[str]:
    """Every out-link has a matching in-link and vice versa."""
    problems = []
    for u in index.snapshot():
        record = index.lookup(u)
        for v in record.out:
            target = index.lookup(v)
            if target is None:
                problems.append(f"edge {u} -> {v} points at a missing vertex")
            elif u not in target.in_:
                problems.append(f"edge {u} -> {v} missing from in-neighbours of {v}")
        for w in record.in_:
            source = index.lookup(w)
            if source is None:
                problems.append(f"edge {w} -> {u} comes from a missing vertex")
            elif u not in source.out:
                problems.append(f"edge {w} -> {u} missing from out-neighbours of {w}")
    return problems


def _check_edge_count(index: VertexIndex, counted: int) -> list[str]:
    actual = sum(index.lookup(v).out_degree for v in index.snapshot())
    if actual != counted:
        return [f"edge count is {counted} but out-neighbour sets hold {actual}"]
    return []
