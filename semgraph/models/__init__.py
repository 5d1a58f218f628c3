#------------------------------------------------------------------------------
# semgraph/models/__init__.py
#
# Value types shared by the graph assembly layer.
#
# Author: Theodore Mui
# Date: 2025-09-02
#------------------------------------------------------------------------------

from .edges import SemanticGraphEdge, TypedDependency
from .token import IndexedToken
from .tree import ConstituentNode

__all__ = [
    "IndexedToken",
    "SemanticGraphEdge",
    "TypedDependency",
    "ConstituentNode",
]
