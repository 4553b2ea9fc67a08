"""BracketBuilder: converts nested Python data into a Bracket tree.

Uses recursive dispatch over the input value. Every node is attached through
``add_sibling``, so the result obeys the same normalization rules as a parsed
tree:

- ``str``           -> LEAF
- ``list``/``tuple`` -> BRANCH of the converted items (``None`` items elided)
- ``None``          -> EMPTY
- ``Bracket``       -> returned unchanged

``to_python`` is the inverse mapping (BRANCH -> list, LEAF -> str,
EMPTY -> None).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bracket_parse.tree.nodes import EMPTY, Bracket, BracketKind, add_sibling, br, lf

# Nested Python shape accepted by BracketBuilder.build
BracketData = str | list[Any] | tuple[Any, ...] | Bracket | None


@dataclass
class BracketBuilder:
    """Converts nested strings and sequences into a Bracket tree.

    The dispatch order matters: ``str`` must be checked before the sequence
    branch would ever see it, and a prebuilt ``Bracket`` is passed through so
    hand-built subtrees can be mixed into plain data.

    Example::

        builder = BracketBuilder()
        tree = builder.build(["hello", ["peter", "dave"]])
        # tree == parse("hello(peter,dave)")
    """

    def build(self, value: BracketData) -> Bracket:
        """Convert ``value`` into a Bracket tree.

        Args:
            value: A string, a (nested) list/tuple of such values, None, or a
                   Bracket.

        Returns:
            The converted tree.

        Raises:
            TypeError: If value (or any nested item) has an unsupported type.
        """
        if isinstance(value, Bracket):
            return value

        if isinstance(value, str):
            return lf(value)

        if isinstance(value, (list, tuple)):
            return self._build_branch(value)

        if value is None:
            return EMPTY

        raise TypeError(f"Unsupported bracket value type: {type(value)!r}")

    def _build_branch(self, items: list[Any] | tuple[Any, ...]) -> Bracket:
        node = br()
        for item in items:
            node = add_sibling(node, self.build(item))
        return node


def to_python(node: Bracket) -> list[Any] | str | None:
    """Convert a Bracket tree into nested lists and strings."""
    if node.kind == BracketKind.BRANCH:
        return [to_python(child) for child in node.children]
    if node.kind == BracketKind.LEAF:
        return node.text
    return None
