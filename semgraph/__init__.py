#------------------------------------------------------------------------------
# semgraph/__init__.py
#
# Dependency graph assembly: build, copy, merge and re-index SemanticGraphs.
#
# Author: Theodore Mui
# Date: 2025-09-02
#------------------------------------------------------------------------------

__version__ = "1.0.0"
