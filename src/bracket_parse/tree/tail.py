"""Tail: a borrowed cursor over a run of sibling nodes.

A ``Tail`` is either resting on a non-empty suffix of a branch's children or
exhausted. It holds a reference to the parent's child list plus a start
offset and never copies children, so creating and discarding cursors per
query costs nothing beyond the object itself.

Example::

    tree = parse("m0 m1 m2 m3")
    tree.tail().tail_h(2)      # Leaf('m3')
    tree.tail_n(3).head()      # Leaf('m3')
    tree.tail_n(9).head()      # Empty
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import islice

from bracket_parse.tree.nodes import EMPTY, Bracket

__all__ = ["Tail"]


class Tail:
    """Non-owning view over ``items[start:]``, or exhausted.

    Every accessor is total: reading past the end gives ``EMPTY`` or an
    exhausted cursor, never an error. The cursor is only valid while the
    branch it was derived from is left unmodified.
    """

    __slots__ = ("_items", "_start")

    def __init__(self, items: Sequence[Bracket] | None = None, start: int = 0) -> None:
        if start < 0:
            msg = f"start must be >= 0, got {start}"
            raise ValueError(msg)
        if items is None or start >= len(items):
            self._items: Sequence[Bracket] | None = None
            self._start = 0
        else:
            self._items = items
            self._start = start

    @classmethod
    def over(cls, items: Sequence[Bracket], start: int = 0) -> Tail:
        """A cursor on ``items`` from ``start``; exhausted if nothing remains."""
        return cls(items, start)

    @property
    def is_exhausted(self) -> bool:
        return self._items is None

    def head(self) -> Bracket:
        if self._items is None:
            return EMPTY
        return self._items[self._start]

    def tail(self) -> Tail:
        return self.tail_n(1)

    def tail_n(self, n: int) -> Tail:
        if n < 0:
            msg = f"offset must be >= 0, got {n}"
            raise ValueError(msg)
        if self._items is None:
            return self
        return Tail(self._items, self._start + n)

    def tail_h(self, n: int) -> Bracket:
        return self.tail_n(n).head()

    def head_tail(self) -> tuple[Bracket, Tail]:
        return self.head(), self.tail()

    def __iter__(self) -> Iterator[Bracket]:
        if self._items is None:
            return iter(())
        return islice(self._items, self._start, None)

    def __len__(self) -> int:
        if self._items is None:
            return 0
        return len(self._items) - self._start

    def __bool__(self) -> bool:
        return self._items is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tail):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self, other, strict=True)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._items is None:
            return "Tail(exhausted)"
        return f"Tail[{', '.join(repr(node) for node in self)}]"
