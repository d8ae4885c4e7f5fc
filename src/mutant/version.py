"""Single source of truth for the mutant version."""

from __future__ import annotations

__version__: str = "0.9.0"

VERSION: str = __version__
"""Alias used by ``--version`` output (``mutant-<VERSION>``)."""
