"""Allow ``python -m mutant`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m mutant`` behaves identically to the ``mutant``
console script.
"""

from __future__ import annotations

from mutant.cli.app import cli

if __name__ == "__main__":
    cli()
