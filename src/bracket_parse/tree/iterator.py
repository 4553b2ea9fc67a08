"""BracketIter: lazy iteration over a node's direct children."""

from __future__ import annotations

from collections.abc import Iterator

from bracket_parse.tree.nodes import Bracket, BracketKind

__all__ = ["BracketIter"]


class BracketIter(Iterator[Bracket]):
    """Yields a branch's direct children by index; a non-branch yields nothing.

    The node is never mutated. ``iter(node)`` builds a fresh BracketIter, so
    iterating the same tree twice gives the same sequence.
    """

    __slots__ = ("_node", "_index")

    def __init__(self, node: Bracket) -> None:
        self._node = node
        self._index = 0

    def __next__(self) -> Bracket:
        if self._node.kind != BracketKind.BRANCH:
            raise StopIteration
        children = self._node.children
        if self._index >= len(children):
            raise StopIteration
        self._index += 1
        return children[self._index - 1]
