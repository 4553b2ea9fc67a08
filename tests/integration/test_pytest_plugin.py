"""Integration tests for the bracket-parse pytest plugin.

These tests verify that the assert_parses_to fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require bracket-parse to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from bracket_parse import ParserConfig, br


def test_fixture_passes_matching_data(assert_parses_to: Any) -> None:
    """Nested lists/strings are converted before comparison."""
    assert_parses_to("hello(peter,dave)", ["hello", ["peter", "dave"]])


def test_fixture_passes_matching_bracket(assert_parses_to: Any) -> None:
    """A prebuilt Bracket is compared directly."""
    assert_parses_to("matt () dave", br().sib_lf("matt").sib(br()).sib_lf("dave"))


def test_fixture_fails_on_mismatch(assert_parses_to: Any) -> None:
    """A different tree raises AssertionError."""
    with pytest.raises(AssertionError, match=r"actual:"):
        assert_parses_to("a b", ["a"])


def test_fixture_custom_config(assert_parses_to: Any) -> None:
    """Custom ParserConfig parameter should be forwarded to parse()."""
    assert_parses_to("a;b", ["a", "b"], config=ParserConfig(separators=(";",)))


def test_fixture_error_message_contents(assert_parses_to: Any) -> None:
    """AssertionError message shows the input and both rendered trees."""
    with pytest.raises(AssertionError) as exc_info:
        assert_parses_to("a (b)", ["a", "b"])

    error_message = str(exc_info.value)
    assert "'a (b)'" in error_message
    assert '"a" ["b"]' in error_message
    assert '"a" "b"' in error_message


def test_fixture_propagates_parse_errors(assert_parses_to: Any) -> None:
    """Parse errors are not turned into assertion failures."""
    with pytest.raises(ValueError, match="not found"):
        assert_parses_to("(a", ["a"])


def test_plugin_discovery() -> None:
    """Verify assert_parses_to appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_parses_to" in result.stdout, (
        f"assert_parses_to not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
