"""
Test Configuration and Fixtures

Provides common fixtures for graph package tests: the running example
sentence "the cat sat", a stub grammar analyzer and a head-annotated
constituent tree.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import Dict, List, Optional

import pytest

from semgraph.graph.interfaces import IGrammarAnalyzer
from semgraph.models import ConstituentNode, IndexedToken, TypedDependency


class StubAnalyzer(IGrammarAnalyzer):
    """Deterministic analyzer returning canned relations per query."""

    def __init__(
        self,
        basic: Optional[List[TypedDependency]] = None,
        collapsed: Optional[List[TypedDependency]] = None,
        cc_processed: Optional[List[TypedDependency]] = None,
        collapsed_tree: Optional[List[TypedDependency]] = None,
        extras: Optional[List[TypedDependency]] = None,
        tree: Optional[ConstituentNode] = None,
    ):
        self._deps: Dict[str, List[TypedDependency]] = {
            "basic": list(basic or []),
            "collapsed": list(collapsed or []),
            "cc-processed": list(cc_processed or []),
            "collapsed-tree": list(collapsed_tree or []),
        }
        self._extras = list(extras or [])
        self._tree = tree
        self.calls = []

    def _answer(self, name: str, include_extras: bool) -> List[TypedDependency]:
        self.calls.append((name, include_extras))
        deps = list(self._deps[name])
        if include_extras:
            deps.extend(self._extras)
        return deps

    def typed_dependencies(self, include_extras: bool = False):
        return self._answer("basic", include_extras)

    def typed_dependencies_collapsed(self, include_extras: bool = False):
        return self._answer("collapsed", include_extras)

    def typed_dependencies_cc_processed(self, include_extras: bool = False):
        return self._answer("cc-processed", include_extras)

    def typed_dependencies_collapsed_tree(self):
        self.calls.append(("collapsed-tree", None))
        return list(self._deps["collapsed-tree"])

    def root(self):
        return self._tree


@pytest.fixture
def stub_analyzer_cls():
    return StubAnalyzer


@pytest.fixture
def tokens(make_token) -> Dict[str, IndexedToken]:
    """Tokens of the sentence 'the cat sat'."""
    return {
        "the": make_token(1, "the", tag="DT"),
        "cat": make_token(2, "cat", tag="NN"),
        "sat": make_token(3, "sat", tag="VBD"),
    }


@pytest.fixture
def sentence_relations(tokens) -> List[TypedDependency]:
    return [
        TypedDependency(tokens["sat"], tokens["cat"], "nsubj", 1.0, False),
        TypedDependency(tokens["cat"], tokens["the"], "det", 1.0, False),
    ]


@pytest.fixture
def extra_relation(tokens) -> TypedDependency:
    return TypedDependency(tokens["the"], tokens["sat"], "ref", 0.5, True)


@pytest.fixture
def sample_tree(tokens) -> ConstituentNode:
    """(S (NP (DT the) (NN cat)) (VP (VBD sat))) with heads cat, sat, sat."""
    np_node = ConstituentNode(
        "NP",
        [
            ConstituentNode("DT", [ConstituentNode("the")], tokens["the"]),
            ConstituentNode("NN", [ConstituentNode("cat")], tokens["cat"]),
        ],
        tokens["cat"],
    )
    vp_node = ConstituentNode(
        "VP",
        [ConstituentNode("VBD", [ConstituentNode("sat")], tokens["sat"])],
        tokens["sat"],
    )
    return ConstituentNode("S", [np_node, vp_node], tokens["sat"])


@pytest.fixture
def sample_analyzer(sentence_relations, extra_relation) -> StubAnalyzer:
    collapsed = list(sentence_relations)
    return StubAnalyzer(
        basic=sentence_relations,
        collapsed=collapsed,
        cc_processed=collapsed,
        collapsed_tree=collapsed,
        extras=[extra_relation],
    )
