"""simplegraph - a small in-memory directed simple graph."""

from simplegraph.config import GraphConfig, load_config
from simplegraph.exceptions import (
    ConfigError,
    GraphIntegrityError,
    InvalidVertexError,
)
from simplegraph.graph import (
    AdjacencyRecord,
    Graph,
    VertexIndex,
    VertexSequence,
    from_networkx,
    to_networkx,
    union,
    validate_graph,
)

__all__ = [
    # Graph
    "Graph",
    "union",
    "validate_graph",
    # Storage
    "AdjacencyRecord",
    "VertexIndex",
    "VertexSequence",
    # networkx interchange
    "to_networkx",
    "from_networkx",
    # Config
    "GraphConfig",
    "load_config",
    # Errors
    "InvalidVertexError",
    "ConfigError",
    "GraphIntegrityError",
]
