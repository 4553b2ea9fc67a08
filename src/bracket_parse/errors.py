"""Parse errors raised by BracketParser.

Both failures are terminal: the parse stops at the first one and no partial
tree is returned. ``BracketParseError`` subclasses ``ValueError`` so callers
that treat malformed input generically can keep catching ``ValueError``.
"""

from __future__ import annotations

__all__ = ["BracketParseError", "TruncatedEscapeError", "UnterminatedGroupError"]


class BracketParseError(ValueError):
    """Base class for every bracket parsing failure."""


class UnterminatedGroupError(BracketParseError):
    """An opened bracket or quote was never closed before the input ended.

    Attributes:
        delimiter: The closing character that was expected.
    """

    def __init__(self, delimiter: str) -> None:
        self.delimiter = delimiter
        super().__init__(f"closing delimiter {delimiter!r} not found")


class TruncatedEscapeError(BracketParseError):
    """The escape character was the last character inside a quoted literal."""

    def __init__(self) -> None:
        super().__init__("escape sequence truncated at end of input")
