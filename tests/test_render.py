"""Tests for render() and str(Bracket)."""

from __future__ import annotations

import pytest

from bracket_parse.api import parse
from bracket_parse.render import EMPTY_PLACEHOLDER, render
from bracket_parse.tree.nodes import EMPTY, br, lf


class TestRender:
    """Serialization format."""

    def test_leaf_is_double_quoted(self) -> None:
        assert render(lf("hello")) == '"hello"'

    def test_empty_placeholder(self) -> None:
        assert render(EMPTY) == EMPTY_PLACEHOLDER == "--EMPTY--"

    def test_empty_branch(self) -> None:
        assert render(br()) == ""

    def test_flat_branch_space_separated(self) -> None:
        assert render(br().sib_lf("a").sib_lf("b")) == '"a" "b"'

    def test_nested_branch(self) -> None:
        tree = br().sib_lf("hello").sib(br().sib_lf("peter").sib_lf("dave"))
        assert render(tree) == '"hello" ["peter" "dave"]'

    def test_str_delegates_to_render(self) -> None:
        tree = br().sib_lf("matt").sib(br()).sib_lf("dave")
        assert str(tree) == render(tree) == '"matt" [] "dave"'

    def test_embedded_quotes_not_escaped(self) -> None:
        assert render(lf('andy "hates" cheese')) == '"andy "hates" cheese"'

    def test_bracket_kind_not_preserved(self) -> None:
        assert render(parse("a {b} (c)")) == '"a" ["b"] ["c"]'


class TestReparse:
    """parse(render(tree)) for leaves without quote or escape characters."""

    @pytest.mark.parametrize(
        "text",
        [
            "hello(peter,dave)",
            "matt () dave",
            "matt ({[() ()]})",
            "'a b' (c, 'd e')",
            "single",
        ],
    )
    def test_round_trip(self, text: str) -> None:
        tree = parse(text)
        assert parse(render(tree)) == tree

    def test_embedded_quotes_do_not_round_trip(self) -> None:
        tree = parse(r'x "andy \"hates\" cheese"')
        assert parse(render(tree)) != tree
