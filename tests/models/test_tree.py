"""
Tests for semgraph.models.tree module.
"""

from semgraph.models import ConstituentNode, IndexedToken


class TestConstituentNode:
    """Test ConstituentNode traversal."""

    def test_preorder(self):
        tree = ConstituentNode(
            "S",
            [
                ConstituentNode("NP", [ConstituentNode("DT"), ConstituentNode("NN")]),
                ConstituentNode("VP"),
            ],
        )
        assert [node.category for node in tree.preorder()] == ["S", "NP", "DT", "NN", "VP"]

    def test_leaves(self):
        tree = ConstituentNode("S", [ConstituentNode("NP"), ConstituentNode("VP")])
        assert [leaf.category for leaf in tree.leaves()] == ["NP", "VP"]
        assert not tree.is_leaf()

    def test_str(self):
        token = IndexedToken(position=1, word="sat")
        tree = ConstituentNode("VP", [ConstituentNode("VBD", [ConstituentNode("sat", head_token=token)])])
        assert str(tree) == "(VP (VBD sat-1))"

    def test_identity_equality(self):
        assert ConstituentNode("NP") != ConstituentNode("NP")
