"""
Root Inference

Default root finder for SemanticGraph. The graph is condensed into strongly
connected components; each component that no other component points into
contributes its lowest-keyed vertex as a root.

On acyclic graphs this is exactly the set of vertices without incoming edges.
Isolated vertices are roots, and a graph that is one big cycle still gets a
single, predictable root.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import Set

import networkx as nx

from semgraph.models import IndexedToken

from .interfaces import IRootFinder


class SourceComponentRootFinder(IRootFinder):
    """Root finder based on the condensation of the graph."""

    def find_roots(self, graph: nx.MultiDiGraph) -> Set[IndexedToken]:
        if graph.number_of_nodes() == 0:
            return set()

        condensed = nx.condensation(nx.DiGraph(graph))
        roots: Set[IndexedToken] = set()
        for component in condensed.nodes:
            if condensed.in_degree(component) == 0:
                members = condensed.nodes[component]["members"]
                roots.add(min(members, key=lambda token: token.key()))
        return roots
