"""
Tests for the generic parse tree.
"""

import dataclasses

import pytest

from folparse.parser.parse_tree import ParseTree


def _var_tree(name: str) -> ParseTree:
    return ParseTree.node(
        "var",
        ParseTree.leaf("VAR", "Var"),
        ParseTree.node("name", ParseTree.leaf("STRING", f'"{name}"')),
    )


class TestConstruction:
    """Test leaf and node construction."""

    def test_leaf(self) -> None:
        leaf = ParseTree.leaf("TRUE", "T")
        assert leaf.is_leaf
        assert leaf.children == ()
        assert leaf.text == "T"

    def test_node(self) -> None:
        tree = _var_tree("x")
        assert not tree.is_leaf
        assert tree.text is None
        assert tree.child_labels() == ("VAR", "name")

    def test_empty_node_is_not_leaf(self) -> None:
        assert not ParseTree.node("terms").is_leaf

    def test_immutable(self) -> None:
        tree = ParseTree.leaf("TRUE", "T")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tree.label = "FALSE"

    def test_structural_equality(self) -> None:
        assert _var_tree("x") == _var_tree("x")
        assert _var_tree("x") != _var_tree("y")


class TestTraversal:
    """Test walk and depth."""

    def test_walk_preorder(self) -> None:
        labels = [node.label for node in _var_tree("x").walk()]
        assert labels == ["var", "VAR", "name", "STRING"]

    def test_depth(self) -> None:
        assert ParseTree.leaf("TRUE", "T").depth() == 1
        assert _var_tree("x").depth() == 3

    def test_deep_tree_depth_and_walk(self) -> None:
        tree = ParseTree.leaf("TRUE", "T")
        for _ in range(5000):
            tree = ParseTree.node("group", tree)
        assert tree.depth() == 5001
        assert sum(1 for _ in tree.walk()) == 5001
