"""pytest plugin for bracket-parse.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from bracket_parse import Bracket, BracketBuilder, ParserConfig, parse


@pytest.fixture(scope="session")
def assert_parses_to() -> Any:
    """Fixture that returns a callable parse-result asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to parse() which creates a fresh BracketParser per call).

    Usage in tests::

        def test_nested(assert_parses_to):
            assert_parses_to("hello(peter,dave)", ["hello", ["peter", "dave"]])

        def test_mismatch(assert_parses_to):
            with pytest.raises(AssertionError, match=r"actual:"):
                assert_parses_to("a b", ["a"])

    Returns:
        A callable ``_assert(text, expected, config=None) -> None`` that raises
        ``AssertionError`` when ``parse(text)`` differs from ``expected``.
    """
    builder = BracketBuilder()

    def _assert(
        text: str,
        expected: Any,
        config: ParserConfig | None = None,
    ) -> None:
        """Assert that ``text`` parses to ``expected``.

        Args:
            text:     The bracketed input to parse.
            expected: A Bracket, or nested lists/strings converted with
                      BracketBuilder.
            config:   Optional ParserConfig for custom delimiters.

        Raises:
            AssertionError: When the parsed tree differs, with a message
                including the input and both trees in rendered form.
        """
        wanted = expected if isinstance(expected, Bracket) else builder.build(expected)
        actual = parse(text, config=config)
        if actual != wanted:
            raise AssertionError(
                f"bracket trees differ for input {text!r}\n"
                f"  actual:   {actual}\n"
                f"  expected: {wanted}"
            )

    return _assert
