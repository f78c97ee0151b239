"""Vertex index and per-vertex adjacency records.

VertexIndex is the single source of truth for which vertices exist. It
knows nothing about edges: keeping the out/in sides of each edge in sync
is the Graph's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class AdjacencyRecord:
    """Out- and in-neighbours of one vertex.

    Both sides are dicts used as insertion-ordered sets (values are None),
    so neighbour traversal is deterministic for a given mutation history.
    """

    out: dict[int, None] = field(default_factory=dict)
    in_: dict[int, None] = field(default_factory=dict)

    @property
    def out_degree(self) -> int:
        return len(self.out)

    @property
    def in_degree(self) -> int:
        return len(self.in_)

    @property
    def is_isolated(self) -> bool:
        return not self.out and not self.in_


class VertexSequence:
    """Restartable view over the vertex ids of an index.

    Every ``iter()`` takes a fresh snapshot of the ids, so the graph may be
    mutated while a traversal is in progress. ``len()`` and ``in`` reflect
    the live index.
    """

    __slots__ = ("_index",)

    def __init__(self, index: VertexIndex) -> None:
        self._index = index

    def __iter__(self) -> Iterator[int]:
        return iter(self._index.snapshot())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index

    def __repr__(self) -> str:
        return f"VertexSequence({self._index.snapshot()!r})"


class VertexIndex:
    """Map of vertex id -> AdjacencyRecord.

    Args:
        sort: If True, traversal yields vertices in ascending order,
            otherwise in the order they were first ensured.
    """

    def __init__(self, *, sort: bool = False) -> None:
        self._records: dict[int, AdjacencyRecord] = {}
        self._sort = sort

    def ensure(self, vertex: int) -> AdjacencyRecord:
        """Return the record for vertex, creating an empty one if absent."""
        record = self._records.get(vertex)
        if record is None:
            record = self._records[vertex] = AdjacencyRecord()
        return record

    def lookup(self, vertex: int) -> AdjacencyRecord | None:
        """Return the record for vertex, or None if it is not indexed."""
        return self._records.get(vertex)

    def erase(self, vertex: int) -> None:
        """Drop vertex's record.

        Does not touch neighbours: the caller must unlink incident edges
        first or the index is left with dangling half-edges.
        """
        self._records.pop(vertex, None)

    def clear(self) -> None:
        self._records.clear()

    def snapshot(self) -> list[int]:
        """Vertex ids in traversal order, as a new list."""
        if self._sort:
            return sorted(self._records)
        return list(self._records)

    def vertices(self) -> VertexSequence:
        """Lazy, restartable sequence of all vertex ids."""
        return VertexSequence(self)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._records
