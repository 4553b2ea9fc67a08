"""Package-level checks: import, version and exported names."""

from __future__ import annotations


def test_import() -> None:
    """Verify top-level package is importable."""
    import bracket_parse

    assert bracket_parse.__version__ == "0.1.0"


def test_all_exports() -> None:
    """__all__ must include the documented public API."""
    import bracket_parse

    expected = {
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
    }
    actual = set(bracket_parse.__all__)
    assert expected == actual, f"Missing: {expected - actual}, Extra: {actual - expected}"
    for name in expected:
        assert hasattr(bracket_parse, name)


def test_plugin_module_not_imported_eagerly() -> None:
    """Importing the package does not pull in the pytest plugin."""
    import bracket_parse.integrations

    assert bracket_parse.integrations.__all__ == []
