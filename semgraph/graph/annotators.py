"""
Projected Category Annotation

Marks every head word with the syntactic category of the largest constituent
it heads. Nodes are visited in reverse pre-order (bottom up), so a head token
that heads several nested constituents ends up with the highest one.

Author: Theodore Mui
Date: 2025-09-02
"""

from loguru import logger

from .interfaces import IConstituentNode


class ProjectedCategoryAnnotator:
    """Single bottom-up pass writing ``projected_category`` onto head tokens."""

    def annotate(self, tree: IConstituentNode) -> int:
        """Annotate the head tokens below ``tree``.

        The node the pass is started on is the designated root and is
        skipped, so the main verb gets its clause category (e.g. ``S``)
        instead of the root marker. Nodes without a head token are skipped.

        Args:
            tree: Root of a constituent tree with head-token annotations

        Returns:
            Number of annotations written
        """
        nodes = list(tree.preorder())
        nodes.reverse()

        written = 0
        for node in nodes:
            if node is tree:
                continue
            head = node.head_token
            if head is None:
                continue
            head.projected_category = node.category
            written += 1

        logger.debug(f"Projected categories written for {written} of {len(nodes)} tree nodes")
        return written
