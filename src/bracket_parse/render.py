"""Render a Bracket tree back to bracketed text.

Output format:
- root BRANCH   -> its children joined by a single space, unwrapped
- nested BRANCH -> "[" + children joined by a single space + "]"
- LEAF          -> the text wrapped in double quotes, with no escaping
- EMPTY         -> the placeholder ``--EMPTY--``

The original bracket kinds are not recorded in the tree, so every nested
group comes back as ``[...]``. Leaf text containing quote or escape characters
is emitted verbatim and will not parse back to the same tree.
"""

from __future__ import annotations

from bracket_parse.tree.nodes import Bracket, BracketKind

__all__ = ["EMPTY_PLACEHOLDER", "render"]

EMPTY_PLACEHOLDER = "--EMPTY--"


def render(node: Bracket) -> str:
    """Serialize ``node`` depth-first.

    Args:
        node: Any Bracket tree.

    Returns:
        The bracketed text form, e.g. ``"hello" ["peter" "dave"]``.
    """
    if node.kind == BracketKind.BRANCH:
        return " ".join(_render_child(child) for child in node.children)
    return _render_child(node)


def _render_child(node: Bracket) -> str:
    if node.kind == BracketKind.BRANCH:
        return "[" + render(node) + "]"
    if node.kind == BracketKind.LEAF:
        return f'"{node.text}"'
    return EMPTY_PLACEHOLDER
