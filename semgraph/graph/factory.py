"""
Semantic Graph Factory

Static entry points that wire the extractor, builder, assembler, duplicator
and aggregator together with default strategies. Use the component classes
directly when custom root or path strategies are needed.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import Iterable, List, Optional, Sequence, Set, Union

from semgraph.models import IndexedToken, SemanticGraphEdge

from .aggregation import MultiGraphAggregator
from .assembly import SpanningPathAssembler
from .builders import GraphBuilder, vertices_from_edges
from .config import ExtractionConfig
from .duplication import GraphDuplicator
from .extractors import AnalyzerFactory, DependencyExtractor, ExtractionMode
from .interfaces import IConstituentNode, IGrammarAnalyzer, RelationPredicate
from .semantic_graph import SemanticGraph

ParseSource = Union[IGrammarAnalyzer, IConstituentNode]


class SemanticGraphFactory:
    """Factory for building, copying and combining SemanticGraphs."""

    @staticmethod
    def make_from_tree(
        source: ParseSource,
        mode: Union[ExtractionMode, str, None] = None,
        include_extras: Optional[bool] = None,
        thread_safe: Optional[bool] = None,
        predicate: Optional[RelationPredicate] = None,
        analyzer_factory: Optional[AnalyzerFactory] = None,
        config: Optional[ExtractionConfig] = None,
    ) -> SemanticGraph:
        """Extract dependencies from a parse and build their graph.

        Args:
            source: Grammar analyzer, or constituent tree plus ``analyzer_factory``
            mode: Extraction mode; defaults to ``config.mode`` (collapsed)
            include_extras: Whether to include extra (non-tree) dependencies;
                defaults to ``config.include_extras``
            thread_safe: Passed to ``analyzer_factory`` for tree input;
                defaults to ``config.thread_safe``
            predicate: Keep only the dependencies it accepts (optional)
            analyzer_factory: Builds an analyzer from a tree (optional)
            config: Extraction defaults (optional)

        Returns:
            New graph; empty when no dependencies survive
        """
        extractor = DependencyExtractor(analyzer_factory=analyzer_factory, config=config)
        deps = extractor.extract(
            source,
            mode=mode,
            include_extras=include_extras,
            predicate=predicate,
            thread_safe=thread_safe,
        )
        return GraphBuilder().from_relations(deps)

    @staticmethod
    def generate_uncollapsed_dependencies(
        source: ParseSource, analyzer_factory: Optional[AnalyzerFactory] = None
    ) -> SemanticGraph:
        """Basic dependencies, no extras."""
        return SemanticGraphFactory.make_from_tree(
            source, ExtractionMode.BASIC, False, True, analyzer_factory=analyzer_factory
        )

    @staticmethod
    def generate_collapsed_dependencies(
        source: ParseSource, analyzer_factory: Optional[AnalyzerFactory] = None
    ) -> SemanticGraph:
        """Collapsed dependencies, no extras."""
        return SemanticGraphFactory.make_from_tree(
            source, ExtractionMode.COLLAPSED, False, True, analyzer_factory=analyzer_factory
        )

    @staticmethod
    def generate_cc_processed_dependencies(
        source: ParseSource, analyzer_factory: Optional[AnalyzerFactory] = None
    ) -> SemanticGraph:
        """CC-processed dependencies, no extras."""
        return SemanticGraphFactory.make_from_tree(
            source, ExtractionMode.CC_PROCESSED, False, True, analyzer_factory=analyzer_factory
        )

    @staticmethod
    def all_typed_dependencies(
        source: ParseSource,
        collapse: bool,
        analyzer_factory: Optional[AnalyzerFactory] = None,
    ) -> SemanticGraph:
        """Basic or collapsed dependencies including extras (may be a non-tree)."""
        mode = ExtractionMode.COLLAPSED if collapse else ExtractionMode.BASIC
        return SemanticGraphFactory.make_from_tree(
            source, mode, True, analyzer_factory=analyzer_factory
        )

    @staticmethod
    def make_from_edges(edges: Iterable[SemanticGraphEdge]) -> SemanticGraph:
        return GraphBuilder().from_edges(edges)

    @staticmethod
    def vertices_from_edges(edges: Iterable[SemanticGraphEdge]) -> Set[IndexedToken]:
        return vertices_from_edges(edges)

    @staticmethod
    def make_from_vertices(
        graph: SemanticGraph, nodes: Iterable[IndexedToken]
    ) -> SemanticGraph:
        """Approximate the subgraph of ``graph`` connecting ``nodes``."""
        return SpanningPathAssembler().assemble(graph, nodes)

    @staticmethod
    def duplicate_keep_nodes(graph: SemanticGraph) -> SemanticGraph:
        return GraphDuplicator().duplicate_keep_nodes(graph)

    @staticmethod
    def make_from_graphs(graphs: Iterable[SemanticGraph]) -> SemanticGraph:
        """Flat union; tokens must already carry distinct sentence indices."""
        return MultiGraphAggregator().merge(graphs)

    @staticmethod
    def deep_copy_from_graphs(
        graphs: Sequence[SemanticGraph],
        lengths: Sequence[int],
        sentence_index: Optional[int] = None,
    ) -> SemanticGraph:
        """Deep merge with positions re-numbered by the running sentence length."""
        return MultiGraphAggregator().deep_merge(graphs, lengths, sentence_index)

    @staticmethod
    def get_available_modes() -> List[str]:
        return [mode.value for mode in ExtractionMode]
