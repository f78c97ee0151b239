"""Conversion between Graph and networkx graphs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import networkx as nx

from simplegraph.graph.core import Graph

if TYPE_CHECKING:
    from simplegraph.config import GraphConfig

logger = logging.getLogger(__name__)


def to_networkx(graph: Graph) -> nx.DiGraph:
    """Copy ``graph`` into a new networkx DiGraph.

    Nodes are added in the graph's traversal order, so isolated vertices
    survive the conversion.
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.vertices())
    G.add_edges_from(graph.edges())
    logger.debug(
        "Converted graph to networkx: %d nodes, %d edges",
        G.number_of_nodes(),
        G.number_of_edges(),
    )
    return G


def from_networkx(G: nx.Graph, *, config: GraphConfig | None = None) -> Graph:
    """Build a Graph from any networkx graph.

    Undirected graphs contribute both directions of each edge. Self-loops
    are dropped, parallel edges collapse and attributes are ignored.
    Node labels must be non-negative ints.

    Raises:
        InvalidVertexError: If a node label is not a valid vertex
    """
    graph = Graph(config=config)
    for node in G.nodes:
        graph.insert_vertex(node)
    for u, v in G.edges():
        if G.is_directed():
            graph.insert_edge(u, v)
        else:
            graph.insert_undirected_edge(u, v)
    logger.debug(
        "Converted networkx graph: %d vertices, %d edges",
        graph.num_vertices(),
        graph.num_edges(),
    )
    return graph
