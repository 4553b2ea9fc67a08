"""Bracket dataclass and BracketKind StrEnum for the parsed tree representation.

A ``Bracket`` is a closed tagged union of three shapes:

- BRANCH: an ordered list of child nodes
- LEAF:   a single text value
- EMPTY:  the "nothing here" sentinel, also returned by navigation misses

``add_sibling`` is the single place where tree shape is decided. The parser
and the chaining helpers (``sib``, ``sib_lf``) both go through it, so a parsed
tree and a hand-built tree with the same content are structurally equal.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bracket_parse.tree.iterator import BracketIter
    from bracket_parse.tree.tail import Tail


class BracketKind(StrEnum):
    """The three node shapes.

    - BRANCH -> "branch" : ordered children, no text
    - LEAF   -> "leaf"   : text, no children
    - EMPTY  -> "empty"  : neither
    """

    BRANCH = auto()
    LEAF = auto()
    EMPTY = auto()


@dataclass(slots=True)
class Bracket:
    """A node of a bracket tree.

    Attributes:
        kind:     Which shape this node has (see BracketKind).
        text:     Leaf text; always "" for branches and the empty node.
        children: Branch children in input order; always empty for leaves
                  and the empty node. A branch never holds an EMPTY child.

    Shape changes never happen in place: ``add_sibling`` returns the node
    that should occupy the caller's slot, which is a different object when
    an empty node adopts a value or a leaf is promoted to a branch.
    """

    kind: BracketKind
    text: str = ""
    children: list[Bracket] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.kind == BracketKind.BRANCH:
            if self.text:
                msg = f"branch nodes carry no text, got {self.text!r}"
                raise ValueError(msg)
            if any(child.kind == BracketKind.EMPTY for child in self.children):
                msg = "branch nodes cannot hold empty children"
                raise ValueError(msg)
        elif self.children:
            msg = f"{self.kind} nodes cannot have children"
            raise ValueError(msg)
        elif self.kind == BracketKind.EMPTY and self.text:
            msg = f"empty nodes carry no text, got {self.text!r}"
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def branch(cls, children: Iterable[Bracket] = ()) -> Bracket:
        """Build a branch, eliding EMPTY children on the way in."""
        node = cls(BracketKind.BRANCH)
        for child in children:
            node = add_sibling(node, child)
        return node

    @classmethod
    def leaf(cls, text: str) -> Bracket:
        return cls(BracketKind.LEAF, text=text)

    @classmethod
    def from_str(cls, text: str) -> Bracket:
        """Parse ``text`` with the default parser options.

        Raises:
            BracketParseError: On an unclosed group/quote or a truncated escape.
        """
        from bracket_parse.parser import BracketParser

        return BracketParser().parse(text)

    # ------------------------------------------------------------------
    # Shape accessors
    # ------------------------------------------------------------------

    @property
    def is_branch(self) -> bool:
        return self.kind == BracketKind.BRANCH

    @property
    def is_leaf(self) -> bool:
        return self.kind == BracketKind.LEAF

    @property
    def is_empty(self) -> bool:
        return self.kind == BracketKind.EMPTY

    def match_str(self) -> str:
        """Return the leaf text, or "" when this node is not a leaf."""
        return self.text if self.kind == BracketKind.LEAF else ""

    # ------------------------------------------------------------------
    # Chained construction
    # ------------------------------------------------------------------

    def sib(self, value: Bracket) -> Bracket:
        """Add ``value`` as a sibling and return the resulting node.

        Always use the return value: ``lf("a").sib(lf("b"))`` is a new
        branch, not the original leaf.
        A branch receiver is appended to in place and returned, so chaining
        twice from the same branch extends that one branch both times.
        """
        return add_sibling(self, value)

    def sib_lf(self, text: str) -> Bracket:
        return self.sib(lf(text))

    # ------------------------------------------------------------------
    # Navigation (total: misses yield EMPTY or an exhausted Tail)
    # ------------------------------------------------------------------

    def head(self) -> Bracket:
        """First child of a branch, or EMPTY."""
        if self.kind == BracketKind.BRANCH and self.children:
            return self.children[0]
        return EMPTY

    def tail(self) -> Tail:
        """Cursor over the children after the first."""
        return self.tail_n(1)

    def tail_n(self, n: int) -> Tail:
        """Cursor over the children starting at offset ``n``."""
        from bracket_parse.tree.tail import Tail

        _check_offset(n)
        if self.kind != BracketKind.BRANCH:
            return Tail.over((), n)
        return Tail.over(self.children, n)

    def tail_h(self, n: int) -> Bracket:
        """Child at offset ``n``, or EMPTY when out of range."""
        _check_offset(n)
        if self.kind == BracketKind.BRANCH and n < len(self.children):
            return self.children[n]
        return EMPTY

    def head_tail(self) -> tuple[Bracket, Tail]:
        return self.head(), self.tail()

    def __iter__(self) -> BracketIter:
        from bracket_parse.tree.iterator import BracketIter

        return BracketIter(self)

    def __len__(self) -> int:
        return len(self.children)

    def __bool__(self) -> bool:
        """Every node except EMPTY is truthy, whatever its child count."""
        return self.kind != BracketKind.EMPTY

    # ------------------------------------------------------------------
    # Text forms
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        from bracket_parse.render import render

        return render(self)

    def __repr__(self) -> str:
        if self.kind == BracketKind.BRANCH:
            return f"Branch[{', '.join(repr(c) for c in self.children)}]"
        if self.kind == BracketKind.LEAF:
            return f"Leaf({self.text!r})"
        return "Empty"


EMPTY = Bracket(BracketKind.EMPTY)


def _check_offset(n: int) -> int:
    if n < 0:
        msg = f"offset must be >= 0, got {n}"
        raise ValueError(msg)
    return n


def br() -> Bracket:
    """A fresh empty branch."""
    return Bracket(BracketKind.BRANCH)


def lf(text: str) -> Bracket:
    """A leaf holding ``text``."""
    return Bracket(BracketKind.LEAF, text=text)


def add_sibling(node: Bracket, value: Bracket) -> Bracket:
    """Attach ``value`` next to ``node`` and return what now fills node's slot.

    Rules, applied in order:
    1. An EMPTY value is discarded; ``node`` is returned unchanged.
    2. An EMPTY node adopts the value: ``value`` itself is returned.
    3. A branch appends ``value`` to its children and is returned.
    4. A leaf is promoted: a new branch ``[Leaf(node.text), value]``.

    Args:
        node:  The node receiving a sibling.
        value: The node being attached.

    Returns:
        The node the caller should store in place of ``node``.
    """
    if value.kind == BracketKind.EMPTY:
        return node
    if node.kind == BracketKind.EMPTY:
        return value
    if node.kind == BracketKind.BRANCH:
        node.children.append(value)
        return node
    return Bracket(BracketKind.BRANCH, children=[lf(node.text), value])


def add_sib_str(node: Bracket, text: str) -> Bracket:
    """``add_sibling`` for accumulated raw text; "" is a no-op."""
    if not text:
        return node
    return add_sibling(node, lf(text))
