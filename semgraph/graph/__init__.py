"""
Graph Assembly Package

This package turns typed dependencies produced by an external grammar
analyzer into SemanticGraphs, and copies, combines and re-indexes those graphs
across sentence boundaries.

The package is organized into the following modules:

Core Interfaces:
    - interfaces: Contracts for the grammar analyzer, constituent trees,
      root inference and shortest path queries

Graph ADT:
    - semantic_graph: networkx-backed directed multigraph
    - roots: default root inference
    - paths: default shortest directed paths

Assembly Layer:
    - annotators: projected-category annotation of constituent trees
    - extractors: mode-based dependency extraction and filtering
    - builders: graphs from relations or edges
    - assembly: spanning-path approximation over a vertex subset
    - duplication: shallow and re-indexing deep copies
    - aggregation: flat and deep merging of several graphs
    - factory: static convenience entry points

Configuration:
    - config: configuration management and validation
    - constants: global constants and message templates
    - exceptions: configuration and consistency errors

Author: Theodore Mui
Date: 2025-09-02
"""

from .aggregation import MergeState, MultiGraphAggregator
from .annotators import ProjectedCategoryAnnotator
from .assembly import SpanningPathAssembler
from .builders import GraphBuilder, vertices_from_edges
from .config import ExtractionConfig, GraphConfig, MergeConfig
from .duplication import DeepCopyResult, GraphDuplicator
from .exceptions import GraphConfigurationError, GraphConsistencyError
from .extractors import DependencyExtractor, ExtractionMode
from .factory import SemanticGraphFactory
from .semantic_graph import SemanticGraph

__all__ = [
    "SemanticGraph",
    "SemanticGraphFactory",
    "GraphBuilder",
    "DependencyExtractor",
    "ExtractionMode",
    "SpanningPathAssembler",
    "GraphDuplicator",
    "DeepCopyResult",
    "MultiGraphAggregator",
    "MergeState",
    "ProjectedCategoryAnnotator",
    "GraphConfig",
    "ExtractionConfig",
    "MergeConfig",
    "GraphConfigurationError",
    "GraphConsistencyError",
    "vertices_from_edges",
]
