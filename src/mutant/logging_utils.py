"""Logging helpers for mutant.

Diagnostics go to stderr through Rich when it is installed, leaving
stdout to ``--help``/``--version`` output.  The level is taken from the
``MUTANT_LOG_LEVEL`` environment variable unless given explicitly.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV: str = "MUTANT_LOG_LEVEL"
DEFAULT_LEVEL: str = "WARNING"

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Map a level name (or the environment) to a ``logging`` level.

    Unknown names fall back to :data:`DEFAULT_LEVEL`.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if isinstance(resolved, int):
        return resolved
    return logging.getLevelName(DEFAULT_LEVEL)


def configure_logging(level: str | None = None) -> None:
    """Configure the ``mutant`` logger hierarchy."""
    resolved = resolve_level(level)
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(level=resolved, format=_FORMAT)
        logging.getLogger("mutant").setLevel(resolved)
        return

    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root = logging.getLogger("mutant")
    root.handlers[:] = [handler]
    root.setLevel(resolved)
    root.propagate = False
