"""BracketParser: recursive-descent conversion of bracketed text into a tree.

The parser walks the input once, left to right, keeping a token accumulator
and the in-progress result node:

- whitespace or a separator flushes the accumulator as a LEAF sibling
- an opening bracket flushes, then recurses until its matching closer and
  attaches the resulting BRANCH
- a quote flushes, then reads verbatim until the same quote recurs; the
  escape character inserts the following character literally
- anything else is appended to the accumulator

Nested groups are parsed by a call parameterised with the single expected
closing character, so recursion depth equals bracket nesting depth. Inputs
nested deeper than the interpreter's recursion limit raise RecursionError.

A closing character that does not close the innermost open group (a stray
")" at top level, or "]" inside "(") is an ordinary token character.
"""

from __future__ import annotations

from collections.abc import Iterator

from bracket_parse.config import DEFAULT_CONFIG, ParserConfig
from bracket_parse.errors import TruncatedEscapeError, UnterminatedGroupError
from bracket_parse.tree.nodes import EMPTY, Bracket, add_sib_str, add_sibling, br, lf

__all__ = ["BracketParser"]


class BracketParser:
    """Parses bracketed, whitespace/comma separated text into a Bracket tree.

    The top-level result starts as EMPTY, so a single value parses to that
    value itself (``"a"`` -> LEAF, ``"(a b)"`` -> BRANCH) and blank input
    parses to EMPTY. Every nested group starts as an empty BRANCH, so ``()``
    yields an empty branch rather than disappearing.

    Example::

        parser = BracketParser()
        parser.parse("hello(peter,dave)")
        # Branch[Leaf('hello'), Branch[Leaf('peter'), Leaf('dave')]]
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_CONFIG

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse(self, text: str) -> Bracket:
        """Parse ``text`` into a tree.

        Args:
            text: The bracketed input.

        Returns:
            The parsed tree: EMPTY for blank input, the single value for
            one top-level value, otherwise a BRANCH of the top-level values.

        Raises:
            UnterminatedGroupError: A bracket or quote is never closed.
            TruncatedEscapeError:   A quoted literal ends on the escape character.
        """
        chars = iter(text)
        token: list[str] = []
        result = EMPTY
        for char in chars:
            result = self._match_char(char, chars, token, result)
        return self._flush(result, token)

    def _match_char(
        self,
        char: str,
        chars: Iterator[str],
        token: list[str],
        result: Bracket,
    ) -> Bracket:
        """Apply one input character to ``result`` and return the new result."""
        if self._config.is_separator(char):
            return self._flush(result, token)

        closer = self._config.closer_for(char)
        if closer is not None:
            result = self._flush(result, token)
            return add_sibling(result, self._parse_group(chars, closer))

        if char in self._config.quotes:
            result = self._flush(result, token)
            return add_sibling(result, self._parse_quoted(chars, char))

        token.append(char)
        return result

    def _parse_group(self, chars: Iterator[str], closer: str) -> Bracket:
        """Parse up to ``closer`` into a fresh BRANCH."""
        token: list[str] = []
        result = br()
        for char in chars:
            if char == closer:
                return self._flush(result, token)
            result = self._match_char(char, chars, token, result)
        raise UnterminatedGroupError(closer)

    def _parse_quoted(self, chars: Iterator[str], quote: str) -> Bracket:
        """Read a quoted literal up to the matching ``quote`` as one LEAF."""
        escape = self._config.escape
        body: list[str] = []
        for char in chars:
            if char == quote:
                return lf("".join(body))
            if char == escape:
                escaped = next(chars, None)
                if escaped is None:
                    raise TruncatedEscapeError
                body.append(escaped)
                continue
            body.append(char)
        raise UnterminatedGroupError(quote)

    @staticmethod
    def _flush(result: Bracket, token: list[str]) -> Bracket:
        """Attach the accumulated token (if any) and reset the accumulator."""
        text = "".join(token)
        token.clear()
        return add_sib_str(result, text)
