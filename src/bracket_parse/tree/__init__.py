"""Tree subpackage: the Bracket node type and read-only navigation over it.

Re-exports the public API for the tree module:
- Bracket / BracketKind / EMPTY: the three-shape tree node and its sentinel
- add_sibling / add_sib_str: the normalizing insertion primitive
- br / lf: chained-construction starting points
- Tail: borrowed head/tail cursor over a branch's children
- BracketIter: iterator over a node's direct children
- BracketBuilder / to_python: conversion from and to nested Python data
"""

from bracket_parse.tree.builder import BracketBuilder, to_python
from bracket_parse.tree.iterator import BracketIter
from bracket_parse.tree.nodes import (
    EMPTY,
    Bracket,
    BracketKind,
    add_sib_str,
    add_sibling,
    br,
    lf,
)
from bracket_parse.tree.tail import Tail

__all__ = [
    "EMPTY",
    "Bracket",
    "BracketBuilder",
    "BracketIter",
    "BracketKind",
    "Tail",
    "add_sib_str",
    "add_sibling",
    "br",
    "lf",
    "to_python",
]
