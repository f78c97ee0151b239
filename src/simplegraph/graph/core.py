"""Graph class for simplegraph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from simplegraph._utils import check_edge, check_vertex
from simplegraph.config import GraphConfig
from simplegraph.graph.index import AdjacencyRecord, VertexIndex, VertexSequence

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class Graph:
    """Directed simple graph over non-negative integer vertices.

    No self-loops and no multi-edges. Vertices come into existence when an
    edge references them or when inserted explicitly, and stay until
    removed with ``remove_vertex``.

    All operations are total over valid vertices: inserting a self-loop,
    removing a missing edge, or querying an unknown vertex is a no-op or
    returns an empty result. Arguments that are not non-negative ints
    raise InvalidVertexError.

    Vertex traversal order comes from ``config.vertex_order``: insertion
    order by default, ascending ids with ``"sorted"``.

    Example:
        >>> g = Graph()
        >>> g.insert_edge(1, 2)
        >>> g.insert_edge(2, 3)
        >>> g.num_vertices(), g.num_edges()
        (3, 2)
        >>> sorted(g.out_neighbors(2))
        [3]
        >>> g.remove_vertex(2)
        >>> list(g.vertices()), g.num_edges()
        ([1, 3], 0)
    """

    __hash__ = None  # mutable

    def __init__(self, *, config: GraphConfig | None = None) -> None:
        self._config = config or GraphConfig()
        self._index = VertexIndex(sort=self._config.vertex_order == "sorted")
        self._num_edges = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[int, int]],
        vertices: Iterable[int] = (),
        *,
        config: GraphConfig | None = None,
    ) -> Graph:
        """Build a graph from edge pairs plus optional isolated vertices.

        ``vertices`` are inserted first, so they lead the insertion order.
        Self-loops in ``edges`` are skipped like any other insert_edge call.
        """
        graph = cls(config=config)
        for v in vertices:
            graph.insert_vertex(v)
        for u, v in edges:
            graph.insert_edge(u, v)
        return graph

    @property
    def config(self) -> GraphConfig:
        return self._config

    # -----------------
    # MUTATION
    # -----------------

    def insert_edge(self, u: int, v: int) -> None:
        """Add edge u -> v. Self-loops and existing edges are ignored."""
        u, v = check_edge(u, v)
        if u == v:
            return
        source = self._index.ensure(u)
        target = self._index.ensure(v)
        if v in source.out:
            return
        source.out[v] = None
        target.in_[u] = None
        self._num_edges += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove edge u -> v if present. Both endpoints stay in the graph."""
        u, v = check_edge(u, v)
        source = self._index.lookup(u)
        if source is None or v not in source.out:
            return
        self._unlink(u, v)

    def insert_vertex(self, v: int) -> None:
        """Add v as a vertex. No-op if already present."""
        self._index.ensure(check_vertex(v))

    def remove_vertex(self, v: int) -> None:
        """Remove v and every edge into or out of it. No-op if absent."""
        v = check_vertex(v)
        record = self._index.lookup(v)
        if record is None:
            return
        # Snapshot both sides: _unlink mutates the dicts being walked
        out_neighbors = list(record.out)
        in_neighbors = list(record.in_)
        for w in out_neighbors:
            self._unlink(v, w)
        for w in in_neighbors:
            self._unlink(w, v)
        self._index.erase(v)
        logger.debug(
            "Removed vertex %d with %d incident edges",
            v,
            len(out_neighbors) + len(in_neighbors),
        )

    def insert_undirected_edge(self, u: int, v: int) -> None:
        """Add both u -> v and v -> u."""
        self.insert_edge(u, v)
        self.insert_edge(v, u)

    def remove_undirected_edge(self, u: int, v: int) -> None:
        """Remove both u -> v and v -> u, whichever exist."""
        self.remove_edge(u, v)
        self.remove_edge(v, u)

    def absorb(self, keep: int, merge: int) -> None:
        """Contract vertex ``merge`` into ``keep``.

        Edges of ``merge`` are re-attached to ``keep``, dropping any that
        would become self-loops (e.g. an edge keep -> merge), then ``merge``
        is removed. ``keep`` is created if absent. No-op when the two are
        equal or ``merge`` is not in the graph.
        """
        keep, merge = check_edge(keep, merge)
        if keep == merge:
            return
        record = self._index.lookup(merge)
        if record is None:
            return
        out_neighbors = list(record.out)
        in_neighbors = list(record.in_)
        self._index.ensure(keep)
        self.remove_vertex(merge)
        for w in out_neighbors:
            self.insert_edge(keep, w)
        for w in in_neighbors:
            self.insert_edge(w, keep)
        logger.debug("Absorbed vertex %d into %d", merge, keep)

    def update(self, other: Graph) -> None:
        """Add every vertex and edge of ``other`` to this graph (in place)."""
        for v in other.vertices():
            self._index.ensure(v)
        for u, v in other.edges():
            self.insert_edge(u, v)
        logger.debug(
            "Merged graph of %d vertices into graph of %d vertices",
            other.num_vertices(),
            self.num_vertices(),
        )

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self._index.clear()
        self._num_edges = 0
        logger.debug("Cleared graph")

    def _unlink(self, u: int, v: int) -> None:
        """Drop both halves of an edge known to exist."""
        del self._record(u).out[v]
        del self._record(v).in_[u]
        self._num_edges -= 1

    def _record(self, v: int) -> AdjacencyRecord:
        record = self._index.lookup(v)
        assert record is not None, f"vertex {v} missing from index"
        return record

    # -----------------
    # QUERIES
    # -----------------

    def contains_edge(self, u: int, v: int) -> bool:
        u, v = check_edge(u, v)
        source = self._index.lookup(u)
        return source is not None and v in source.out

    def contains_vertex(self, v: int) -> bool:
        return check_vertex(v) in self._index

    def num_vertices(self) -> int:
        return len(self._index)

    def num_edges(self) -> int:
        return self._num_edges

    def out_degree(self, v: int) -> int:
        record = self._index.lookup(check_vertex(v))
        return 0 if record is None else record.out_degree

    def in_degree(self, v: int) -> int:
        record = self._index.lookup(check_vertex(v))
        return 0 if record is None else record.in_degree

    def degree(self, v: int) -> int:
        """In-degree plus out-degree.

        A neighbour linked in both directions counts once on each side.
        """
        return self.out_degree(v) + self.in_degree(v)

    def out_neighbors(self, v: int) -> frozenset[int]:
        """Targets of edges leaving v. Empty for unknown vertices."""
        record = self._index.lookup(check_vertex(v))
        return frozenset() if record is None else frozenset(record.out)

    def in_neighbors(self, v: int) -> frozenset[int]:
        """Sources of edges entering v. Empty for unknown vertices."""
        record = self._index.lookup(check_vertex(v))
        return frozenset() if record is None else frozenset(record.in_)

    def is_isolated(self, v: int) -> bool:
        """True if v is in the graph with no edges at all."""
        record = self._index.lookup(check_vertex(v))
        return record is not None and record.is_isolated

    def isolated_vertices(self) -> list[int]:
        return [v for v in self._index.snapshot() if self._record(v).is_isolated]

    def is_undirected(self) -> bool:
        """True if every edge u -> v is matched by v -> u."""
        return all(
            self._record(v).out.keys() == self._record(v).in_.keys()
            for v in self._index.snapshot()
        )

    # -----------------
    # TRAVERSAL
    # -----------------

    def vertices(self) -> VertexSequence:
        """Restartable sequence of vertex ids in traversal order.

        Each iteration works on a snapshot taken when it starts.
        """
        return self._index.vertices()

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate over (source, target) pairs, grouped by source.

        Sources follow vertex traversal order; the pairs are snapshotted
        when this is called.
        """
        pairs = [
            (u, v) for u in self._index.snapshot() for v in self._record(u).out
        ]
        return iter(pairs)

    # -----------------
    # DERIVED GRAPHS
    # -----------------

    def subgraph(self, vertices: Iterable[int]) -> Graph:
        """Induced subgraph over ``vertices``.

        The result holds exactly the given vertices and the edges of this
        graph with both endpoints among them. Vertices not in this graph
        are still included, as isolated vertices. Vertices already present
        keep this graph's traversal order; the rest follow in ascending
        order.
        """
        members = {check_vertex(v) for v in vertices}
        sub = Graph(config=self._config)
        present = [v for v in self._index.snapshot() if v in members]
        for v in present:
            sub._index.ensure(v)
        for v in sorted(members.difference(present)):
            sub._index.ensure(v)
        for u in present:
            for v in self._record(u).out:
                if v in members:
                    sub.insert_edge(u, v)
        logger.debug(
            "Extracted subgraph with %d vertices and %d edges",
            sub.num_vertices(),
            sub.num_edges(),
        )
        return sub

    def union(self, other: Graph) -> Graph:
        """New graph with the vertices and edges of both. Inputs untouched."""
        return union(self, other)

    def copy(self) -> Graph:
        """Independent copy with the same vertices, edges and config."""
        new_graph = Graph(config=self._config)
        for v in self._index.snapshot():
            new_graph._index.ensure(v)
        for u, v in self.edges():
            new_graph.insert_edge(u, v)
        return new_graph

    # -----------------
    # PYTHON PROTOCOL
    # -----------------

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, v: object) -> bool:
        """Vertex membership. Values that are not vertices are never members."""
        if isinstance(v, bool) or not isinstance(v, int):
            return False
        return v in self._index

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices())

    def __eq__(self, other: object) -> bool:
        """Same vertex set and same edge set, regardless of order."""
        if not isinstance(other, Graph):
            return NotImplemented
        if (
            self.num_vertices() != other.num_vertices()
            or self.num_edges() != other.num_edges()
        ):
            return False
        return set(self.vertices()) == set(other.vertices()) and set(
            self.edges()
        ) == set(other.edges())

    def __repr__(self) -> str:
        return f"Graph(vertices={self.num_vertices()}, edges={self.num_edges()})"


def union(a: Graph, b: Graph) -> Graph:
    """New graph whose vertices and edges are those of ``a`` and ``b``.

    Neither input is modified. The result takes ``a``'s config; ``a``'s
    vertices come first in insertion order, then ``b``'s new ones.
    """
    result = a.copy()
    result.update(b)
    logger.debug(
        "Built union with %d vertices and %d edges",
        result.num_vertices(),
        result.num_edges(),
    )
    return result
