"""
Semantic Graph

Directed multigraph of IndexedTokens joined by labelled SemanticGraphEdges.
Storage is a networkx MultiDiGraph; root inference and shortest path queries
are delegated to injected strategies (IRootFinder, IPathFinder) so the
assembly layer can be tested against simple deterministic stubs.

A graph is populated in a single assembly pass and treated as read-only
afterwards. Every transformation in this package builds a new graph.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

import networkx as nx

from semgraph.models import IndexedToken, SemanticGraphEdge

from .constants import ERROR_MESSAGES
from .interfaces import IPathFinder, IRootFinder
from .paths import BreadthFirstPathFinder
from .roots import SourceComponentRootFinder


class SemanticGraph:
    """Directed, possibly cyclic, possibly multi-rooted dependency graph.

    Example:
        graph = SemanticGraph()
        graph.add_edge(sat, cat, "nsubj")
        graph.reset_roots()
        graph.get_roots()  # {sat}
    """

    def __init__(
        self,
        root_finder: Optional[IRootFinder] = None,
        path_finder: Optional[IPathFinder] = None,
    ):
        """Initialize an empty graph.

        Args:
            root_finder: Root inference strategy (optional)
            path_finder: Shortest path strategy (optional)
        """
        self._graph = nx.MultiDiGraph()
        # Insertion-ordered views; networkx is used for the algorithms
        self._vertices: Dict[Tuple[int, int], IndexedToken] = {}
        self._edges: Dict[SemanticGraphEdge, SemanticGraphEdge] = {}
        self._roots: Set[IndexedToken] = set()

        self._root_finder = root_finder or SourceComponentRootFinder()
        self._path_finder = path_finder or BreadthFirstPathFinder()

    @property
    def root_finder(self) -> IRootFinder:
        return self._root_finder

    @property
    def path_finder(self) -> IPathFinder:
        return self._path_finder

    def new_empty(self) -> "SemanticGraph":
        """Create an empty graph sharing this graph's strategies."""
        return SemanticGraph(self._root_finder, self._path_finder)

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, token: IndexedToken) -> bool:
        """Add a vertex; returns False if a token with the same key exists."""
        if token.key() in self._vertices:
            return False
        self._vertices[token.key()] = token
        self._graph.add_node(token)
        return True

    def get_vertex(self, token: IndexedToken) -> Optional[IndexedToken]:
        """Return the stored token that shares ``token``'s key, if any."""
        return self._vertices.get(token.key())

    def contains_vertex(self, token: IndexedToken) -> bool:
        return token.key() in self._vertices

    def vertex_set(self) -> Set[IndexedToken]:
        return set(self._vertices.values())

    def vertex_list_sorted(self) -> List[IndexedToken]:
        return sorted(self._vertices.values(), key=lambda token: token.key())

    def vertex_count(self) -> int:
        return len(self._vertices)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(
        self,
        source: IndexedToken,
        target: IndexedToken,
        relation: str,
        weight: float = 1.0,
        extra: bool = False,
    ) -> SemanticGraphEdge:
        """Add a labelled edge, inserting missing endpoints.

        Adding an edge that is already present is a no-op and returns the
        stored edge.
        """
        self.add_vertex(source)
        self.add_vertex(target)
        governor = self._vertices[source.key()]
        dependent = self._vertices[target.key()]

        edge = SemanticGraphEdge(governor, dependent, relation, weight, extra)
        if edge in self._edges:
            return self._edges[edge]

        self._edges[edge] = edge
        self._graph.add_edge(governor, dependent, key=edge.edge_key(), edge=edge)
        return edge

    def add_edge_from(self, edge: SemanticGraphEdge) -> SemanticGraphEdge:
        return self.add_edge(edge.source, edge.target, edge.relation, edge.weight, edge.extra)

    def contains_edge(
        self,
        source: IndexedToken,
        target: IndexedToken,
        relation: Optional[str] = None,
    ) -> bool:
        if not (self.contains_vertex(source) and self.contains_vertex(target)):
            return False
        governor = self._vertices[source.key()]
        dependent = self._vertices[target.key()]
        if relation is None:
            return self._graph.has_edge(governor, dependent)
        return any(edge.relation == relation for edge in self._edges_between(governor, dependent))

    def edge_iterable(self) -> Iterator[SemanticGraphEdge]:
        """Iterate edges in insertion order."""
        return iter(list(self._edges))

    def edge_list(self) -> List[SemanticGraphEdge]:
        return list(self._edges)

    def edge_count(self) -> int:
        return len(self._edges)

    def outgoing_edges(self, token: IndexedToken) -> List[SemanticGraphEdge]:
        if not self.contains_vertex(token):
            return []
        vertex = self._vertices[token.key()]
        return [edge for _, _, edge in self._graph.out_edges(vertex, data="edge")]

    def incoming_edges(self, token: IndexedToken) -> List[SemanticGraphEdge]:
        if not self.contains_vertex(token):
            return []
        vertex = self._vertices[token.key()]
        return [edge for _, _, edge in self._graph.in_edges(vertex, data="edge")]

    def _edges_between(
        self, governor: IndexedToken, dependent: IndexedToken
    ) -> List[SemanticGraphEdge]:
        parallel = self._graph.get_edge_data(governor, dependent) or {}
        return [data["edge"] for data in parallel.values()]

    # ------------------------------------------------------------------
    # Roots
    # ------------------------------------------------------------------

    def get_roots(self) -> Set[IndexedToken]:
        return set(self._roots)

    def get_first_root(self) -> IndexedToken:
        """Return the root with the lowest (sentence_index, position) key."""
        if not self._roots:
            raise ValueError(ERROR_MESSAGES["no_roots"])
        return min(self._roots, key=lambda token: token.key())

    def set_roots(self, roots: Iterable[IndexedToken]) -> None:
        """Replace the root set; roots that are not yet vertices are added."""
        new_roots: Set[IndexedToken] = set()
        for root in roots:
            self.add_vertex(root)
            new_roots.add(self._vertices[root.key()])
        self._roots = new_roots

    def reset_roots(self) -> Set[IndexedToken]:
        """Recompute the root set from the current vertices and edges."""
        self._roots = set(self._root_finder.find_roots(self._graph))
        return self.get_roots()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_shortest_directed_path_edges(
        self, source: IndexedToken, target: IndexedToken
    ) -> Optional[List[SemanticGraphEdge]]:
        """Edges of a shortest directed path from source to target, or None."""
        return self._path_finder.shortest_path_edges(self._graph, source, target)

    def to_networkx(self) -> nx.MultiDiGraph:
        """Read-only networkx view of the graph."""
        return self._graph.copy(as_view=True)

    def is_empty(self) -> bool:
        return not self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, IndexedToken) and self.contains_vertex(token)

    def __str__(self) -> str:
        lines = [str(edge) for edge in self._edges]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SemanticGraph(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()}, roots={len(self._roots)})"
        )
