"""Exit-code constants used by the CLI layer.

Every process exit path maps to one of these values; ``run()`` itself
only returns a boolean which ``main()`` translates here.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The run completed and its report signalled success."""

GENERAL_ERROR: int = 1
"""The command line was rejected, the report signalled failure, or a
known MutantError was caught."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
