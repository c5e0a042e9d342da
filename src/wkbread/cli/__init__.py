"""CLI module for wkbread.

Provides the command-line interface for decoding WKB payloads.
"""

from __future__ import annotations

from wkbread.cli.main import app

__all__ = ["app"]
