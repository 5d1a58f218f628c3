#------------------------------------------------------------------------------
# edges.py
#
# Immutable relation records: typed dependencies as produced by a grammar
# analyzer, and the labelled edges stored inside a SemanticGraph.
#
# Author: Theodore Mui
# Date: 2025-09-02
#------------------------------------------------------------------------------

from dataclasses import dataclass
from typing import Tuple

from .token import IndexedToken


@dataclass(frozen=True)
class SemanticGraphEdge:
    """Directed edge from a governor (source) to a dependent (target)."""

    source: IndexedToken
    target: IndexedToken
    relation: str
    weight: float = 1.0
    extra: bool = False  # True for edges that break tree shape

    @property
    def governor(self) -> IndexedToken:
        return self.source

    @property
    def dependent(self) -> IndexedToken:
        return self.target

    def edge_key(self) -> Tuple[str, float, bool]:
        """Key separating parallel edges between the same two vertices."""
        return (self.relation, self.weight, self.extra)

    def __str__(self) -> str:
        return f"{self.relation}({self.source}, {self.target})"


@dataclass(frozen=True)
class TypedDependency:
    """A single grammatical relation reported by a grammar analyzer."""

    governor: IndexedToken
    dependent: IndexedToken
    relation: str
    weight: float = 1.0
    extra: bool = False

    def to_edge(self) -> SemanticGraphEdge:
        return SemanticGraphEdge(
            source=self.governor,
            target=self.dependent,
            relation=self.relation,
            weight=self.weight,
            extra=self.extra,
        )

    def __str__(self) -> str:
        return f"{self.relation}({self.governor}, {self.dependent})"
