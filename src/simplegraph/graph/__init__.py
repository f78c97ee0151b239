"""Graph package - adjacency storage, the Graph class and validation."""

from simplegraph.graph._helpers import from_networkx, to_networkx
from simplegraph.graph.core import Graph, union
from simplegraph.graph.index import AdjacencyRecord, VertexIndex, VertexSequence
from simplegraph.graph.validation import validate_graph

__all__ = [
    "AdjacencyRecord",
    "Graph",
    "VertexIndex",
    "VertexSequence",
    "from_networkx",
    "to_networkx",
    "union",
    "validate_graph",
]
