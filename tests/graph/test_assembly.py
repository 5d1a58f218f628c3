"""
Tests for Spanning-Path Assembly

Author: Theodore Mui
Date: 2025-09-02
"""

from unittest.mock import Mock

import pytest

from semgraph.graph.assembly import SpanningPathAssembler
from semgraph.graph.interfaces import IPathFinder
from semgraph.graph.semantic_graph import SemanticGraph


@pytest.fixture
def chain(make_token):
    """a -> x -> b, plus an unrelated branch a -> y."""
    a, x, b, y = make_token(1, "a"), make_token(2, "x"), make_token(3, "b"), make_token(4, "y")
    graph = SemanticGraph()
    graph.add_edge(a, x, "first")
    graph.add_edge(x, b, "second")
    graph.add_edge(a, y, "other")
    graph.reset_roots()
    return graph, a, x, b, y


class TestSpanningPathAssembler:
    """Tests for SpanningPathAssembler."""

    def test_path_through_intermediate_vertex(self, chain):
        graph, a, x, b, y = chain
        result = SpanningPathAssembler().assemble(graph, [a, b])

        assert result.vertex_set() == {a, x, b}
        assert {edge.relation for edge in result.edge_list()} == {"first", "second"}
        assert result.get_roots() == {a}

    def test_single_vertex(self, chain):
        graph, a, _, _, _ = chain
        result = SpanningPathAssembler().assemble(graph, [a])

        assert result.vertex_set() == {a}
        assert result.edge_count() == 0
        assert result.get_roots() == {a}

    def test_empty_required_set(self, chain):
        graph = chain[0]
        assert SpanningPathAssembler().assemble(graph, []).is_empty()

    def test_unreachable_pairs_are_skipped(self, chain):
        graph, _, x, _, y = chain
        result = SpanningPathAssembler().assemble(graph, [x, y])

        assert result.vertex_set() == {x, y}
        assert result.edge_count() == 0
        assert result.get_roots() == {x, y}

    def test_overlapping_paths_are_unioned(self, chain):
        graph, a, x, b, _ = chain
        result = SpanningPathAssembler().assemble(graph, [a, x, b])
        assert result.edge_count() == 2

    def test_duplicate_required_vertices(self, chain, make_token):
        graph, a, x, b, _ = chain
        result = SpanningPathAssembler().assemble(graph, [a, b, make_token(1, "A")])
        assert result.vertex_set() == {a, x, b}

    def test_source_graph_is_untouched(self, chain):
        graph, a, _, b, _ = chain
        SpanningPathAssembler().assemble(graph, [a, b])
        assert graph.edge_count() == 3

    def test_queries_every_ordered_pair(self, chain):
        graph, a, x, b, _ = chain
        finder = Mock(spec=IPathFinder)
        finder.shortest_path_edges.return_value = None
        stubbed = SemanticGraph(path_finder=finder)
        for edge in graph.edge_iterable():
            stubbed.add_edge_from(edge)

        SpanningPathAssembler().assemble(stubbed, [a, x, b])
        assert finder.shortest_path_edges.call_count == 6

    def test_result_is_order_independent(self, chain):
        graph, a, x, b, _ = chain
        forward = SpanningPathAssembler().assemble(graph, [a, b])
        backward = SpanningPathAssembler().assemble(graph, [b, a])
        assert set(forward.edge_list()) == set(backward.edge_list())
