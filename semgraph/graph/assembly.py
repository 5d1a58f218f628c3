"""
Spanning-Path Assembly

Approximates the smallest subgraph connecting a set of required vertices by
taking the union of the shortest directed paths between every ordered pair.
Overlapping paths are not pruned and the result can be larger than a true
Steiner tree; callers who need exact minimality must not rely on it.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import Dict, Iterable, List, Optional, Tuple

from loguru import logger

from semgraph.models import IndexedToken, SemanticGraphEdge

from .builders import GraphBuilder
from .semantic_graph import SemanticGraph


class SpanningPathAssembler:
    """Builds a connecting subgraph from pairwise shortest paths."""

    def __init__(self, builder: Optional[GraphBuilder] = None):
        self._builder = builder

    def assemble(
        self, graph: SemanticGraph, required: Iterable[IndexedToken]
    ) -> SemanticGraph:
        """Connect ``required`` using shortest paths found in ``graph``.

        Args:
            graph: Source graph to draw paths from
            required: Vertices that must appear in the result

        Returns:
            New graph holding the required vertices, every vertex on a found
            path and the union of the path edges, with roots re-inferred
        """
        # Coalesce duplicates by key, keep first-seen order
        nodes: Dict[Tuple[int, int], IndexedToken] = {}
        for token in required:
            nodes.setdefault(token.key(), token)
        ordered = list(nodes.values())

        vertices: Dict[Tuple[int, int], IndexedToken] = dict(nodes)
        edges: Dict[SemanticGraphEdge, None] = {}
        queries = 0
        unreachable = 0

        for node_a in ordered:
            for node_b in ordered:
                if node_a == node_b:
                    continue
                queries += 1
                path = graph.get_shortest_directed_path_edges(node_a, node_b)
                if path is None:
                    unreachable += 1
                    continue
                for edge in path:
                    edges.setdefault(edge, None)
                    vertices.setdefault(edge.governor.key(), edge.governor)
                    vertices.setdefault(edge.dependent.key(), edge.dependent)

        logger.debug(
            f"Spanning paths over {len(ordered)} vertices: {queries} queries, "
            f"{unreachable} unreachable, {len(edges)} edges kept"
        )

        builder = self._builder or GraphBuilder(graph.root_finder, graph.path_finder)
        edge_list: List[SemanticGraphEdge] = list(edges)
        return builder.from_vertices_and_edges(vertices.values(), edge_list)
