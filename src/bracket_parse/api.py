"""Public API functions for bracket-parse.

``parse`` creates a fresh BracketParser per call so no state is shared
between calls; ``render`` is re-exported from the renderer.
"""

from __future__ import annotations

from bracket_parse.config import ParserConfig
from bracket_parse.parser import BracketParser
from bracket_parse.render import render
from bracket_parse.tree.nodes import Bracket

__all__ = ["parse", "render"]


def parse(text: str, config: ParserConfig | None = None) -> Bracket:
    """Parse bracketed text into a Bracket tree.

    Args:
        text:   Whitespace/comma separated values, nested with ``()``, ``{}``
                or ``[]`` and optionally quoted with ``"`` or ``'``.
        config: Delimiter characters. Defaults to ``ParserConfig()`` when None.

    Returns:
        EMPTY for blank input, the single value when the input holds one
        top-level value, otherwise a BRANCH of the top-level values.

    Raises:
        UnterminatedGroupError: A bracket or quote is never closed.
        TruncatedEscapeError:   A quoted literal ends on the escape character.
    """
    return BracketParser(config=config).parse(text)
