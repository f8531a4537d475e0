"""Integrations subpackage for json-document-model.

Contains the pytest plugin, auto-discovered via the pytest11 entry point.
It only depends on pytest, which is imported when pytest loads the plugin.
"""

from __future__ import annotations

__all__: list[str] = []
