"""
Graph Building

Turns relation or edge collections into SemanticGraphs. Vertices are inferred
from edge endpoints and roots are inferred once, after everything has been
inserted. Malformed input is never rejected: unknown endpoints are added as
vertices when their edge is inserted.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import Iterable, Optional, Set

from loguru import logger

from semgraph.models import IndexedToken, SemanticGraphEdge, TypedDependency

from .interfaces import IPathFinder, IRootFinder
from .semantic_graph import SemanticGraph


def vertices_from_edges(edges: Iterable[SemanticGraphEdge]) -> Set[IndexedToken]:
    """Return the set of vertices covered by ``edges``."""
    vertices: Set[IndexedToken] = set()
    for edge in edges:
        vertices.add(edge.governor)
        vertices.add(edge.dependent)
    return vertices


class GraphBuilder:
    """Builds new graphs with the configured root and path strategies."""

    def __init__(
        self,
        root_finder: Optional[IRootFinder] = None,
        path_finder: Optional[IPathFinder] = None,
    ):
        self._root_finder = root_finder
        self._path_finder = path_finder

    def new_graph(self) -> SemanticGraph:
        return SemanticGraph(self._root_finder, self._path_finder)

    def from_relations(self, relations: Iterable[TypedDependency]) -> SemanticGraph:
        """Build a graph with one edge per relation."""
        return self.from_edges(relation.to_edge() for relation in relations)

    def from_edges(self, edges: Iterable[SemanticGraphEdge]) -> SemanticGraph:
        """Build a graph from already materialized edges."""
        edges = list(edges)
        return self.from_vertices_and_edges(vertices_from_edges(edges), edges)

    def from_vertices_and_edges(
        self,
        vertices: Iterable[IndexedToken],
        edges: Iterable[SemanticGraphEdge],
    ) -> SemanticGraph:
        """Build a graph from explicit vertices plus edges, then infer roots."""
        graph = self.new_graph()
        for vertex in sorted(vertices, key=lambda token: token.key()):
            graph.add_vertex(vertex)
        for edge in edges:
            graph.add_edge_from(edge)
        graph.reset_roots()

        logger.debug(
            f"Built graph with {graph.vertex_count()} vertices, "
            f"{graph.edge_count()} edges, {len(graph.get_roots())} roots"
        )
        return graph
