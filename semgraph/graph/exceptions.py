"""
Graph Assembly Errors

Two failure classes surface from the assembly layer. Configuration errors are
raised before any work is done; consistency errors signal that caller-supplied
metadata (offsets, sentence lengths) does not match the graphs being merged.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import Optional


class GraphConfigurationError(ValueError):
    """Raised for invalid requests such as an unknown extraction mode."""

    def __init__(self, message: str, setting: str = ""):
        """Initialize configuration error with context.

        Args:
            message: Human-readable error description.
            setting: Name of the offending setting or argument.
        """
        self.setting = setting
        super().__init__(message)

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.setting:
            base_msg = f"[{self.setting}] {base_msg}"
        return base_msg


class GraphConsistencyError(RuntimeError):
    """Raised when re-indexing cannot resolve an edge endpoint to a cloned token."""

    def __init__(
        self,
        message: str,
        graph_index: Optional[int] = None,
        position: Optional[int] = None,
    ):
        """Initialize consistency error with context.

        Args:
            message: Human-readable error description.
            graph_index: Index of the source graph being merged, if any.
            position: Merged position that failed to resolve.
        """
        self.graph_index = graph_index
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        base_msg = super().__str__()
        details = []
        if self.graph_index is not None:
            details.append(f"graph={self.graph_index}")
        if self.position is not None:
            details.append(f"position={self.position}")
        if details:
            base_msg = f"{base_msg} ({', '.join(details)})"
        return base_msg
