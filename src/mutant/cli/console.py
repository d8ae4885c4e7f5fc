"""Stderr reporting for the ``cli()`` error boundary.

Rich is imported on first use, not at module import, so ``--help`` and
``--version`` keep working without it; messages then go to plain
stderr with their ``[style]`` markup removed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from mutant.exceptions import EnvironmentError, MutantError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    return _load_rich_console_class()(stderr=True)


def strip_markup(text: str) -> str:
    """Drop ``[style]`` and ``[/style]`` tags from *text*."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Writes boundary messages to stderr, through Rich when installed."""

    def print(self, text: str) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(strip_markup(text), file=sys.stderr)
            return
        rich_console.print(text, highlight=False)

    def error(self, exc: MutantError) -> None:
        """Report a domain failure with its hint, if any."""
        self.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            self.print(f"[yellow]Hint:[/yellow] {exc.hint}")

    def interrupted(self) -> None:
        self.print("\n[yellow]Aborted by user.[/yellow]")

    def unexpected(self, exc: BaseException) -> None:
        """Report an exception no layer was meant to raise."""
        self.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )


console = _ConsoleProxy()
