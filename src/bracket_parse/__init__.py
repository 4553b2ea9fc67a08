"""Bracket parse - a permissive parser for bracketed lists of strings."""

from __future__ import annotations

from bracket_parse.api import parse, render
from bracket_parse.config import ParserConfig
from bracket_parse.errors import (
    BracketParseError,
    TruncatedEscapeError,
    UnterminatedGroupError,
)
from bracket_parse.parser import BracketParser
from bracket_parse.tree import (
    EMPTY,
    Bracket,
    BracketBuilder,
    BracketIter,
    BracketKind,
    Tail,
    add_sib_str,
    add_sibling,
    br,
    lf,
    to_python,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "EMPTY",
    "Bracket",
    "BracketBuilder",
    "BracketIter",
    "BracketKind",
    "BracketParseError",
    "BracketParser",
    "ParserConfig",
    "Tail",
    "TruncatedEscapeError",
    "UnterminatedGroupError",
    "add_sib_str",
    "add_sibling",
    "br",
    "lf",
    "parse",
    "render",
    "to_python",
]
