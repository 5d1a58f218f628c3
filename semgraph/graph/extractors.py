"""
Dependency Extraction

Selects which typed-dependency query to run against a grammar analyzer and
optionally filters the result before it is handed to the GraphBuilder.

Author: Theodore Mui
Date: 2025-09-02
"""

from enum import Enum
from typing import Callable, List, Optional, Union

from loguru import logger

from semgraph.models import TypedDependency

from .annotators import ProjectedCategoryAnnotator
from .config import ExtractionConfig
from .constants import ERROR_MESSAGES, MODE_ALIASES, PUNCTUATION_WORDS
from .exceptions import GraphConfigurationError
from .interfaces import IConstituentNode, IGrammarAnalyzer, RelationPredicate

WordFilter = Callable[[str], bool]
AnalyzerFactory = Callable[[IConstituentNode, WordFilter, bool], IGrammarAnalyzer]


class ExtractionMode(str, Enum):
    """How the grammar analyzer aggregates raw dependencies."""

    BASIC = "basic"
    COLLAPSED = "collapsed"
    COLLAPSED_TREE = "collapsed-tree"
    CC_PROCESSED = "cc-processed"

    @classmethod
    def parse(cls, value: Union["ExtractionMode", str]) -> "ExtractionMode":
        """Resolve an enum member or one of its accepted spellings.

        Raises:
            GraphConfigurationError: If the value names no known mode
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        if normalized not in MODE_ALIASES:
            raise GraphConfigurationError(
                ERROR_MESSAGES["unknown_mode"].format(mode=value), setting="mode"
            )
        return cls(MODE_ALIASES[normalized])


def punctuation_word_reject_filter(word: str) -> bool:
    """Accept every word that is not Penn Treebank punctuation."""
    return word not in PUNCTUATION_WORDS


def accept_all_words(word: str) -> bool:
    return True


class DependencyExtractor:
    """Produces the (optionally filtered) relation collection for one parse.

    Accepts either a ready grammar analyzer or a constituent tree. Trees are
    annotated with projected categories and turned into an analyzer through
    the injected ``analyzer_factory``.

    Example:
        extractor = DependencyExtractor(analyzer_factory=make_analyzer)
        deps = extractor.extract(tree, "cc-processed", include_extras=True)
    """

    def __init__(
        self,
        analyzer_factory: Optional[AnalyzerFactory] = None,
        annotator: Optional[ProjectedCategoryAnnotator] = None,
        config: Optional[ExtractionConfig] = None,
    ):
        """Initialize the extractor with its collaborators.

        Args:
            analyzer_factory: Builds an analyzer from (tree, word_filter, thread_safe)
            annotator: Projected-category annotator (optional)
            config: Extraction defaults (optional)
        """
        self._analyzer_factory = analyzer_factory
        self._annotator = annotator or ProjectedCategoryAnnotator()
        self.config = config or ExtractionConfig()

    def word_filter(self) -> WordFilter:
        if self.config.include_punctuation:
            return accept_all_words
        return punctuation_word_reject_filter

    def analyzer_for(
        self,
        source: Union[IGrammarAnalyzer, IConstituentNode],
        thread_safe: bool = False,
    ) -> IGrammarAnalyzer:
        """Return an analyzer for ``source``, annotating its tree on the way."""
        if isinstance(source, IGrammarAnalyzer):
            tree = source.root()
            if tree is not None:
                self._annotator.annotate(tree)
            return source

        if self._analyzer_factory is None:
            raise GraphConfigurationError(
                ERROR_MESSAGES["missing_analyzer_factory"], setting="analyzer_factory"
            )
        self._annotator.annotate(source)
        return self._analyzer_factory(source, self.word_filter(), thread_safe)

    def query(
        self,
        analyzer: IGrammarAnalyzer,
        mode: Union[ExtractionMode, str],
        include_extras: bool = False,
    ) -> List[TypedDependency]:
        """Run the analyzer query that corresponds to ``mode``.

        ``include_extras`` has no effect in collapsed-tree mode.
        """
        mode = ExtractionMode.parse(mode)
        if mode is ExtractionMode.COLLAPSED_TREE:
            deps = analyzer.typed_dependencies_collapsed_tree()
        elif mode is ExtractionMode.COLLAPSED:
            deps = analyzer.typed_dependencies_collapsed(include_extras)
        elif mode is ExtractionMode.CC_PROCESSED:
            deps = analyzer.typed_dependencies_cc_processed(include_extras)
        elif mode is ExtractionMode.BASIC:
            deps = analyzer.typed_dependencies(include_extras)
        else:
            raise GraphConfigurationError(
                ERROR_MESSAGES["unknown_mode"].format(mode=mode), setting="mode"
            )
        return list(deps)

    def extract(
        self,
        source: Union[IGrammarAnalyzer, IConstituentNode],
        mode: Union[ExtractionMode, str, None] = None,
        include_extras: Optional[bool] = None,
        predicate: Optional[RelationPredicate] = None,
        thread_safe: Optional[bool] = None,
    ) -> List[TypedDependency]:
        """Extract the relation collection for one parse.

        Args:
            source: Grammar analyzer or constituent tree
            mode: Extraction mode; defaults to the configured mode
            include_extras: Whether to request extra (non-tree) relations
            predicate: Keep only the relations it accepts (optional)
            thread_safe: Passed to the analyzer factory for tree input

        Returns:
            Relations in analyzer order; may be empty

        Raises:
            GraphConfigurationError: On an unknown mode, or tree input
                without an analyzer factory
        """
        resolved_mode = ExtractionMode.parse(mode if mode is not None else self.config.mode)
        if include_extras is None:
            include_extras = self.config.include_extras
        if thread_safe is None:
            thread_safe = self.config.thread_safe

        analyzer = self.analyzer_for(source, thread_safe)
        deps = self.query(analyzer, resolved_mode, include_extras)
        total = len(deps)

        if predicate is not None:
            deps = [dep for dep in deps if predicate(dep)]

        logger.debug(
            f"Extracted {len(deps)} of {total} relations "
            f"(mode={resolved_mode.value}, extras={include_extras})"
        )
        return deps
