"""
Multi-Graph Aggregation

Combines several graphs into one. ``merge`` is a plain union that keeps the
original tokens; ``deep_merge`` re-numbers tokens into one contiguous range
using the declared length of each source sentence.

The deep merge is a fold over an immutable MergeState, so every step can be
run and inspected on its own.

Author: Theodore Mui
Date: 2025-09-02
"""

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from loguru import logger

from semgraph.models import IndexedToken, SemanticGraphEdge

from .config import MergeConfig
from .constants import ERROR_MESSAGES
from .duplication import GraphDuplicator
from .exceptions import GraphConfigurationError, GraphConsistencyError
from .semantic_graph import SemanticGraph


@dataclass(frozen=True)
class MergeState:
    """Accumulator threaded through the deep merge."""

    offset: int = 0
    token_map: Mapping[int, IndexedToken] = field(default_factory=dict)
    vertices: Tuple[IndexedToken, ...] = ()
    edges: Tuple[SemanticGraphEdge, ...] = ()
    roots: Tuple[IndexedToken, ...] = ()
    graphs_merged: int = 0


class MultiGraphAggregator:
    """Merges per-sentence graphs into a single graph.

    Example:
        aggregator = MultiGraphAggregator()
        merged = aggregator.deep_merge([first, second], lengths=[3, 2])
    """

    def __init__(
        self,
        duplicator: Optional[GraphDuplicator] = None,
        config: Optional[MergeConfig] = None,
    ):
        self._duplicator = duplicator or GraphDuplicator()
        self.config = config or MergeConfig()

    def merge(self, graphs: Iterable[SemanticGraph]) -> SemanticGraph:
        """Union of vertices, edges and roots, keeping original tokens.

        Tokens must already be globally unique (distinct sentence indices);
        equal keys from different graphs coalesce into one vertex. The root
        set is the union of the input root sets and is not re-inferred.
        """
        graphs = list(graphs)
        merged = graphs[0].new_empty() if graphs else SemanticGraph()

        roots = set()
        for graph in graphs:
            roots.update(graph.get_roots())
            for vertex in graph.vertex_list_sorted():
                merged.add_vertex(vertex)
            for edge in graph.edge_iterable():
                merged.add_edge(
                    edge.governor, edge.dependent, edge.relation, edge.weight, edge.extra
                )
        merged.set_roots(roots)

        logger.debug(f"Merged {len(graphs)} graphs into {merged!r}")
        return merged

    def merge_step(
        self,
        state: MergeState,
        graph: SemanticGraph,
        length: int,
        sentence_index: Optional[int] = None,
    ) -> MergeState:
        """Fold one graph into ``state`` and return the next state.

        Raises:
            GraphConfigurationError: If ``length`` is negative
            GraphConsistencyError: If positions collide with an earlier graph
                or an endpoint cannot be resolved
        """
        if length < 0:
            raise GraphConfigurationError(
                ERROR_MESSAGES["negative_length"].format(length=length), setting="lengths"
            )

        graph_index = state.graphs_merged
        clones = self._duplicator.clone_vertices(
            graph, state.offset, sentence_index, graph_index
        )
        collisions = sorted(set(clones) & set(state.token_map))
        if collisions:
            raise GraphConsistencyError(
                ERROR_MESSAGES["position_collision"].format(position=collisions[0]),
                graph_index=graph_index,
                position=collisions[0],
            )

        token_map = {**state.token_map, **clones}
        edges = self._duplicator.clone_edges(graph, token_map, state.offset, graph_index)
        roots = self._duplicator.clone_roots(graph, token_map, state.offset, graph_index)

        return MergeState(
            offset=state.offset + length,
            token_map=token_map,
            vertices=state.vertices + tuple(clones.values()),
            edges=state.edges + tuple(edges),
            roots=state.roots + tuple(roots),
            graphs_merged=graph_index + 1,
        )

    def deep_merge(
        self,
        graphs: Sequence[SemanticGraph],
        lengths: Sequence[int],
        sentence_index: Optional[int] = None,
    ) -> SemanticGraph:
        """Deep copy and re-number ``graphs`` into one graph.

        ``lengths[i]`` must be the number of tokens the positions of
        ``graphs[i]`` were drawn from, which can exceed the number of
        vertices actually present (filtered punctuation, for instance).

        Args:
            graphs: Source graphs in sentence order
            lengths: Declared token count of each source sentence
            sentence_index: Sentence index stamped on every clone; defaults to
                the configured value, or the original index when not set

        Returns:
            New graph whose roots are the re-mapped roots of every input

        Raises:
            GraphConfigurationError: If graphs and lengths differ in size
            GraphConsistencyError: On offset/length mismatches
        """
        graphs = list(graphs)
        lengths = list(lengths)
        if len(graphs) != len(lengths):
            raise GraphConfigurationError(
                ERROR_MESSAGES["length_mismatch"].format(
                    graphs=len(graphs), lengths=len(lengths)
                ),
                setting="lengths",
            )
        if sentence_index is None:
            sentence_index = self.config.target_sentence_index()

        final = reduce(
            lambda state, pair: self.merge_step(state, pair[0], pair[1], sentence_index),
            zip(graphs, lengths),
            MergeState(),
        )

        merged = graphs[0].new_empty() if graphs else SemanticGraph()
        for vertex in final.vertices:
            merged.add_vertex(vertex)
        for edge in final.edges:
            merged.add_edge_from(edge)
        merged.set_roots(final.roots)

        logger.debug(
            f"Deep merged {final.graphs_merged} graphs over {final.offset} positions "
            f"into {merged!r}"
        )
        return merged
