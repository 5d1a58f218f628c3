"""
Graph Assembly Interfaces

This module defines abstract base classes for the collaborators of the graph
assembly layer: the grammar analyzer that produces typed dependencies, the
constituent tree it is derived from, and the two algorithmic capabilities
(root inference and shortest directed paths) that SemanticGraph delegates to.

Each interface defines a specific contract, so the assembly layer can be
exercised against small deterministic stubs.

Author: Theodore Mui
Date: 2025-09-02
"""

from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Optional,
    Protocol,
    Set,
    runtime_checkable,
)

from semgraph.models import IndexedToken, SemanticGraphEdge, TypedDependency

if TYPE_CHECKING:
    import networkx as nx


@runtime_checkable
class IConstituentNode(Protocol):
    """Read contract for a phrase-structure tree node.

    Structural, so trees produced by external parsers can be passed in
    without subclassing.
    """

    category: str
    head_token: Optional[IndexedToken]

    def preorder(self) -> Iterator["IConstituentNode"]: ...


class IGrammarAnalyzer(ABC):
    """Interface for the component that derives typed dependencies from a parse.

    Head finding and relation collapsing live behind this contract; the
    assembly layer only chooses which query to run.
    """

    @abstractmethod
    def typed_dependencies(self, include_extras: bool = False) -> List[TypedDependency]:
        """Basic (uncollapsed) dependencies."""
        pass

    @abstractmethod
    def typed_dependencies_collapsed(
        self, include_extras: bool = False
    ) -> List[TypedDependency]:
        """Dependencies with prepositions and conjunctions collapsed."""
        pass

    @abstractmethod
    def typed_dependencies_cc_processed(
        self, include_extras: bool = False
    ) -> List[TypedDependency]:
        """Collapsed dependencies with conjunct propagation."""
        pass

    @abstractmethod
    def typed_dependencies_collapsed_tree(self) -> List[TypedDependency]:
        """Collapsed dependencies restricted to a tree; never contains extras."""
        pass

    def root(self) -> Optional[IConstituentNode]:
        """Constituent tree the dependencies were derived from, if known."""
        return None


class IRootFinder(ABC):
    """Interface for root inference over a directed graph.

    Implementations must be deterministic: the same vertex and edge sets
    always yield the same roots.
    """

    @abstractmethod
    def find_roots(self, graph: "nx.MultiDiGraph") -> Set[IndexedToken]:
        """Compute the root set of a graph whose nodes are IndexedTokens."""
        pass


class IPathFinder(ABC):
    """Interface for shortest directed path queries."""

    @abstractmethod
    def shortest_path_edges(
        self,
        graph: "nx.MultiDiGraph",
        source: IndexedToken,
        target: IndexedToken,
    ) -> Optional[List[SemanticGraphEdge]]:
        """Edges of some shortest directed path, or None when unreachable."""
        pass

    def describe_tie_breaking(self) -> str:
        """Human-readable statement of how equal-length paths are chosen."""
        return "unspecified"


class IConfiguration(ABC):
    """Interface for configuration management.

    Handles loading, validation, and access to configuration settings.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        pass

    @abstractmethod
    def validate(self) -> bool:
        """Validate the configuration."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        pass


RelationPredicate = Callable[[TypedDependency], bool]
