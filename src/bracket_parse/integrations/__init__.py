"""Integrations subpackage for bracket-parse.

Contains the pytest plugin (auto-discovered via the pytest11 entry point).
It is not imported here so that importing bracket_parse never requires pytest.
"""

from __future__ import annotations

__all__: list[str] = []
