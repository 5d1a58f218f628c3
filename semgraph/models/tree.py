#------------------------------------------------------------------------------
# tree.py
#
# Minimal phrase-structure tree with head-token annotations. Parsers that
# already provide their own tree type only need to expose the same three
# members (category, head_token, preorder).
#
# Author: Theodore Mui
# Date: 2025-09-02
#------------------------------------------------------------------------------

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .token import IndexedToken


@dataclass(eq=False)
class ConstituentNode:
    category: str
    children: List["ConstituentNode"] = field(default_factory=list)
    head_token: Optional[IndexedToken] = None

    def is_leaf(self) -> bool:
        return not self.children

    def preorder(self) -> Iterator["ConstituentNode"]:
        """Yield this node and then each subtree, left to right."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> List["ConstituentNode"]:
        return [node for node in self.preorder() if node.is_leaf()]

    def __str__(self) -> str:
        if self.is_leaf():
            return str(self.head_token) if self.head_token is not None else self.category
        inner = " ".join(str(child) for child in self.children)
        return f"({self.category} {inner})"
