"""Tests for BracketIter and iteration over Bracket nodes."""

from __future__ import annotations

from bracket_parse.tree.iterator import BracketIter
from bracket_parse.tree.nodes import EMPTY, br, lf


class TestBracketIter:
    """Direct-child iteration."""

    def test_last_child(self) -> None:
        node = br().sib_lf("a").sib_lf("b").sib_lf("c")
        assert list(node)[-1].match_str() == "c"

    def test_yields_children_in_order(self) -> None:
        node = br().sib_lf("a").sib(br().sib_lf("x")).sib_lf("c")
        assert list(BracketIter(node)) == node.children

    def test_does_not_descend(self) -> None:
        node = br().sib(br().sib_lf("x").sib_lf("y"))
        assert len(list(node)) == 1

    def test_restartable(self) -> None:
        node = br().sib_lf("a").sib_lf("b")
        assert list(node) == list(node)

    def test_leaf_yields_nothing(self) -> None:
        assert list(lf("a")) == []

    def test_empty_yields_nothing(self) -> None:
        assert list(EMPTY) == []

    def test_is_its_own_iterator(self) -> None:
        it = iter(br().sib_lf("a"))
        assert isinstance(it, BracketIter)
        assert iter(it) is it
        assert next(it) == lf("a")
        assert next(it, None) is None

    def test_does_not_mutate(self) -> None:
        node = br().sib_lf("a").sib_lf("b")
        list(node)
        assert node == br().sib_lf("a").sib_lf("b")
