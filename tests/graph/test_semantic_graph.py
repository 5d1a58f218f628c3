"""
Tests for the SemanticGraph ADT

Covers idempotent insertion, implicit vertex creation, root handling and
delegation to injected strategies.

Author: Theodore Mui
Date: 2025-09-02
"""

from unittest.mock import Mock

import pytest

from semgraph.graph.interfaces import IPathFinder, IRootFinder
from semgraph.graph.semantic_graph import SemanticGraph
from semgraph.models import IndexedToken


class TestVertices:
    """Tests for vertex insertion and lookup."""

    def test_empty_graph(self):
        graph = SemanticGraph()
        assert graph.is_empty()
        assert len(graph) == 0
        assert graph.vertex_set() == set()
        assert graph.edge_list() == []
        assert graph.get_roots() == set()

    def test_add_vertex_is_idempotent(self, tokens):
        graph = SemanticGraph()
        assert graph.add_vertex(tokens["cat"]) is True
        assert graph.add_vertex(tokens["cat"]) is False
        assert graph.vertex_count() == 1

    def test_equal_keys_coalesce_to_first_instance(self, tokens):
        graph = SemanticGraph()
        graph.add_vertex(tokens["cat"])
        duplicate = IndexedToken(position=2, word="CAT")
        graph.add_vertex(duplicate)
        assert graph.vertex_count() == 1
        assert graph.get_vertex(duplicate) is tokens["cat"]
        assert duplicate in graph

    def test_vertex_list_sorted(self, tokens):
        graph = SemanticGraph()
        for name in ("sat", "the", "cat"):
            graph.add_vertex(tokens[name])
        assert graph.vertex_list_sorted() == [tokens["the"], tokens["cat"], tokens["sat"]]


class TestEdges:
    """Tests for edge insertion and queries."""

    def test_add_edge_inserts_endpoints(self, tokens):
        graph = SemanticGraph()
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        assert graph.vertex_set() == {tokens["sat"], tokens["cat"]}
        assert graph.edge_count() == 1

    def test_add_edge_is_idempotent(self, tokens):
        graph = SemanticGraph()
        first = graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        second = graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        assert first is second
        assert graph.edge_count() == 1

    def test_parallel_labelled_edges_are_kept(self, tokens):
        graph = SemanticGraph()
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        graph.add_edge(tokens["sat"], tokens["cat"], "agent")
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj", weight=0.5)
        assert graph.edge_count() == 3
        assert graph.contains_edge(tokens["sat"], tokens["cat"], "agent")
        assert not graph.contains_edge(tokens["sat"], tokens["cat"], "dobj")
        assert not graph.contains_edge(tokens["cat"], tokens["sat"])

    def test_edge_iterable_in_insertion_order(self, tokens):
        graph = SemanticGraph()
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        graph.add_edge(tokens["cat"], tokens["the"], "det")
        assert [edge.relation for edge in graph.edge_iterable()] == ["nsubj", "det"]

    def test_edges_use_stored_vertex_instances(self, tokens):
        graph = SemanticGraph()
        graph.add_vertex(tokens["cat"])
        edge = graph.add_edge(tokens["sat"], IndexedToken(position=2, word="CAT"), "nsubj")
        assert edge.dependent is tokens["cat"]

    def test_incoming_and_outgoing(self, tokens):
        graph = SemanticGraph()
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        graph.add_edge(tokens["cat"], tokens["the"], "det")
        assert [e.relation for e in graph.outgoing_edges(tokens["cat"])] == ["det"]
        assert [e.relation for e in graph.incoming_edges(tokens["cat"])] == ["nsubj"]
        assert graph.outgoing_edges(IndexedToken(position=99)) == []

    def test_str_lists_edges(self, tokens):
        graph = SemanticGraph()
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        assert str(graph) == "nsubj(sat-3, cat-2)"
        assert "edges=1" in repr(graph)


class TestRoots:
    """Tests for root storage and inference."""

    def test_reset_roots_single_root(self, tokens):
        graph = SemanticGraph()
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        graph.add_edge(tokens["cat"], tokens["the"], "det")
        assert graph.reset_roots() == {tokens["sat"]}
        assert graph.get_first_root() is tokens["sat"]

    def test_set_roots_adds_missing_vertices(self, tokens):
        graph = SemanticGraph()
        graph.set_roots([tokens["sat"]])
        assert graph.contains_vertex(tokens["sat"])
        assert graph.get_roots() == {tokens["sat"]}

    def test_get_roots_returns_copy(self, tokens):
        graph = SemanticGraph()
        graph.set_roots([tokens["sat"]])
        graph.get_roots().clear()
        assert graph.get_roots() == {tokens["sat"]}

    def test_first_root_of_rootless_graph_raises(self):
        with pytest.raises(ValueError, match="no roots"):
            SemanticGraph().get_first_root()


class TestStrategies:
    """Tests for delegation to injected strategies."""

    def test_reset_roots_delegates(self, tokens):
        finder = Mock(spec=IRootFinder)
        finder.find_roots.return_value = {tokens["cat"]}
        graph = SemanticGraph(root_finder=finder)
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")

        assert graph.reset_roots() == {tokens["cat"]}
        finder.find_roots.assert_called_once()

    def test_shortest_path_delegates(self, tokens):
        finder = Mock(spec=IPathFinder)
        finder.shortest_path_edges.return_value = None
        graph = SemanticGraph(path_finder=finder)

        assert graph.get_shortest_directed_path_edges(tokens["the"], tokens["sat"]) is None
        finder.shortest_path_edges.assert_called_once()

    def test_new_empty_shares_strategies(self):
        root_finder = Mock(spec=IRootFinder)
        path_finder = Mock(spec=IPathFinder)
        graph = SemanticGraph(root_finder, path_finder)
        copy = graph.new_empty()
        assert copy.root_finder is root_finder
        assert copy.path_finder is path_finder
        assert copy.is_empty()

    def test_to_networkx_view(self, tokens):
        graph = SemanticGraph()
        graph.add_edge(tokens["sat"], tokens["cat"], "nsubj")
        view = graph.to_networkx()
        assert view.number_of_nodes() == 2
        assert view.number_of_edges() == 1
