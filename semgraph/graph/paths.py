"""
Shortest Directed Paths

Default path finder for SemanticGraph: an unweighted breadth-first search
delegated to networkx.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import List, Optional

import networkx as nx

from semgraph.models import IndexedToken, SemanticGraphEdge

from .interfaces import IPathFinder


class BreadthFirstPathFinder(IPathFinder):
    """Unweighted shortest directed paths.

    Tie-breaking: among several shortest paths the one networkx's
    bidirectional search reaches first is returned, which follows edge
    insertion order. Between two consecutive vertices joined by parallel
    edges, the edge inserted first is used.
    """

    def shortest_path_edges(
        self,
        graph: nx.MultiDiGraph,
        source: IndexedToken,
        target: IndexedToken,
    ) -> Optional[List[SemanticGraphEdge]]:
        if source not in graph or target not in graph:
            return None
        try:
            nodes = nx.shortest_path(graph, source, target)
        except nx.NetworkXNoPath:
            return None

        edges: List[SemanticGraphEdge] = []
        for governor, dependent in zip(nodes, nodes[1:]):
            parallel = graph.get_edge_data(governor, dependent)
            first = next(iter(parallel.values()))
            edges.append(first["edge"])
        return edges

    def describe_tie_breaking(self) -> str:
        return "first path found by bidirectional BFS; first inserted parallel edge"
