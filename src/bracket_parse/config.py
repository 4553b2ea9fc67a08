"""ParserConfig: the delimiter characters BracketParser recognises.

ParserConfig is a frozen (immutable) dataclass. The defaults describe the
standard notation; a custom instance can swap individual characters but the
parsing rules themselves never change. All bracket pairs produce identical
branches, so the kind of bracket used in the input is not recorded.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_CONFIG", "ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable delimiter table for BracketParser.

    Attributes:
        brackets:   (open, close) pairs that start and end a nested group.
        quotes:     Characters that open a quoted literal closed by the same
                    character.
        escape:     Inside a quoted literal, inserts the next character verbatim.
        separators: Token terminators in addition to whitespace, which always
                    separates.
    """

    brackets: tuple[tuple[str, str], ...] = (("(", ")"), ("{", "}"), ("[", "]"))
    quotes: tuple[str, ...] = ('"', "'")
    escape: str = "\\"
    separators: tuple[str, ...] = (",",)

    def __post_init__(self) -> None:
        chars: list[str] = [c for pair in self.brackets for c in pair]
        chars.extend(self.quotes)
        chars.append(self.escape)
        chars.extend(self.separators)
        for char in chars:
            if len(char) != 1:
                msg = f"delimiters must be single characters, got {char!r}"
                raise ValueError(msg)
            if char.isspace():
                msg = f"whitespace cannot be a delimiter, got {char!r}"
                raise ValueError(msg)
        duplicates = sorted({c for c in chars if chars.count(c) > 1})
        if duplicates:
            msg = f"delimiters must not play more than one role, got {duplicates}"
            raise ValueError(msg)

    def closer_for(self, char: str) -> str | None:
        """Return the closing character for an opening bracket, else None."""
        for open_char, close_char in self.brackets:
            if char == open_char:
                return close_char
        return None

    def is_separator(self, char: str) -> bool:
        return char.isspace() or char in self.separators


DEFAULT_CONFIG = ParserConfig()
