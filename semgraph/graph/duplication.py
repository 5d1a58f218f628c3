"""
Graph Duplication

Shallow duplicates share token identities with the source graph; deep copies
clone every token with a shifted position so graphs built from independently
numbered sentences can be combined without their tokens colliding.

A standalone deep copy tracks clones by their full (sentence_index, position)
key, so graphs spanning several sentences copy cleanly. The deep merge tracks
clones by merged position only; see ``clone_vertices``.

Author: Theodore Mui
Date: 2025-09-02
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from loguru import logger

from semgraph.models import IndexedToken, SemanticGraphEdge

from .constants import ERROR_MESSAGES
from .exceptions import GraphConsistencyError
from .semantic_graph import SemanticGraph

TokenKey = Tuple[int, int]


@dataclass(frozen=True)
class DeepCopyResult:
    """A deep-copied graph and the map from clone keys to cloned tokens."""

    graph: SemanticGraph
    token_map: Mapping[TokenKey, IndexedToken]


class GraphDuplicator:
    """Shallow and deep (re-indexing) graph copies."""

    def duplicate_keep_nodes(self, graph: SemanticGraph) -> SemanticGraph:
        """Copy ``graph`` reusing its token objects and root set.

        Edges are rebuilt, so the copy's edge collection can be changed
        without touching the original.
        """
        copy = graph.new_empty()
        for vertex in graph.vertex_list_sorted():
            copy.add_vertex(vertex)
        copy.set_roots(graph.get_roots())
        for edge in graph.edge_iterable():
            copy.add_edge(edge.governor, edge.dependent, edge.relation, edge.weight, edge.extra)
        return copy

    def deep_copy(
        self,
        graph: SemanticGraph,
        offset: int = 0,
        sentence_index: Optional[int] = None,
        graph_index: Optional[int] = None,
    ) -> DeepCopyResult:
        """Clone every token of ``graph`` with ``position + offset``.

        Args:
            graph: Graph to copy, possibly spanning several sentences
            offset: Amount added to every token position
            sentence_index: New sentence index for every clone (optional)
            graph_index: Index of ``graph`` in a larger merge, for error context

        Returns:
            DeepCopyResult with the new graph and its clone-key map

        Raises:
            GraphConsistencyError: If an edge endpoint or root has no clone, or
                a normalized ``sentence_index`` folds two vertices onto one key
        """
        token_map = self.clone_vertices_by_key(graph, offset, sentence_index, graph_index)

        def locate(token: IndexedToken) -> IndexedToken:
            key = self.clone_key(token, offset, sentence_index)
            return self.resolve_key(token_map, key, graph_index)

        edges = self._rebuild_edges(graph, locate)
        roots = [locate(root) for root in sorted(graph.get_roots(), key=lambda t: t.key())]

        copy = graph.new_empty()
        for clone in token_map.values():
            copy.add_vertex(clone)
        for edge in edges:
            copy.add_edge_from(edge)
        copy.set_roots(roots)

        logger.debug(f"Deep copied {copy!r} at offset {offset}")
        return DeepCopyResult(graph=copy, token_map=token_map)

    @staticmethod
    def clone_token(
        token: IndexedToken, offset: int, sentence_index: Optional[int] = None
    ) -> IndexedToken:
        return token.copy_with(position=token.position + offset, sentence_index=sentence_index)

    @staticmethod
    def clone_key(
        token: IndexedToken, offset: int, sentence_index: Optional[int] = None
    ) -> TokenKey:
        """Key the clone of ``token`` will carry."""
        index = token.sentence_index if sentence_index is None else sentence_index
        return (index, token.position + offset)

    @staticmethod
    def resolve(
        token_map: Mapping[int, IndexedToken],
        position: int,
        graph_index: Optional[int] = None,
    ) -> IndexedToken:
        """Look up the clone issued for a merged position.

        Raises:
            GraphConsistencyError: If no clone was issued for ``position``
        """
        clone = token_map.get(position)
        if clone is None:
            raise GraphConsistencyError(
                ERROR_MESSAGES["unresolved_endpoint"].format(position=position),
                graph_index=graph_index,
                position=position,
            )
        return clone

    @staticmethod
    def resolve_key(
        token_map: Mapping[TokenKey, IndexedToken],
        key: TokenKey,
        graph_index: Optional[int] = None,
    ) -> IndexedToken:
        """Look up the clone issued for a (sentence_index, position) key.

        Raises:
            GraphConsistencyError: If no clone was issued for ``key``
        """
        clone = token_map.get(key)
        if clone is None:
            raise GraphConsistencyError(
                ERROR_MESSAGES["unresolved_key"].format(key=key),
                graph_index=graph_index,
                position=key[1],
            )
        return clone

    def clone_vertices_by_key(
        self,
        graph: SemanticGraph,
        offset: int,
        sentence_index: Optional[int] = None,
        graph_index: Optional[int] = None,
    ) -> Dict[TokenKey, IndexedToken]:
        """Clone every vertex, keyed by the clone's own key.

        Raises:
            GraphConsistencyError: If two vertices are cloned onto the same key
        """
        clones: Dict[TokenKey, IndexedToken] = {}
        for vertex in graph.vertex_list_sorted():
            clone = self.clone_token(vertex, offset, sentence_index)
            if clone.key() in clones:
                raise GraphConsistencyError(
                    ERROR_MESSAGES["key_collision"].format(key=clone.key()),
                    graph_index=graph_index,
                    position=clone.position,
                )
            clones[clone.key()] = clone
        return clones

    def clone_vertices(
        self,
        graph: SemanticGraph,
        offset: int,
        sentence_index: Optional[int] = None,
        graph_index: Optional[int] = None,
    ) -> Dict[int, IndexedToken]:
        """Clone every vertex of one sentence graph, keyed by its merged position.

        Used by the deep merge, where each input graph holds a single
        sentence and the merged position alone identifies a clone.

        Raises:
            GraphConsistencyError: If two vertices land on the same position
        """
        clones: Dict[int, IndexedToken] = {}
        for vertex in graph.vertex_list_sorted():
            clone = self.clone_token(vertex, offset, sentence_index)
            if clone.position in clones:
                raise GraphConsistencyError(
                    ERROR_MESSAGES["position_collision"].format(position=clone.position),
                    graph_index=graph_index,
                    position=clone.position,
                )
            clones[clone.position] = clone
        return clones

    def clone_edges(
        self,
        graph: SemanticGraph,
        token_map: Mapping[int, IndexedToken],
        offset: int,
        graph_index: Optional[int] = None,
    ) -> List[SemanticGraphEdge]:
        return self._rebuild_edges(
            graph, lambda token: self.resolve(token_map, token.position + offset, graph_index)
        )

    def clone_roots(
        self,
        graph: SemanticGraph,
        token_map: Mapping[int, IndexedToken],
        offset: int,
        graph_index: Optional[int] = None,
    ) -> List[IndexedToken]:
        roots = sorted(graph.get_roots(), key=lambda token: token.key())
        return [self.resolve(token_map, root.position + offset, graph_index) for root in roots]

    @staticmethod
    def _rebuild_edges(
        graph: SemanticGraph, locate: Callable[[IndexedToken], IndexedToken]
    ) -> List[SemanticGraphEdge]:
        return [
            SemanticGraphEdge(
                source=locate(edge.governor),
                target=locate(edge.dependent),
                relation=edge.relation,
                weight=edge.weight,
                extra=edge.extra,
            )
            for edge in graph.edge_iterable()
        ]
