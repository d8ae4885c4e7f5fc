"""Regression tests for the optional Rich dependency.

``--help``/``--version``, the error boundary and logging setup must keep
working when Rich is missing.
"""

from __future__ import annotations

import logging
import sys
from unittest.mock import patch

import pytest

from mutant.cli import exit_codes
from mutant.cli.app import cli, main
from mutant.cli.console import console, get_rich_console
from mutant.exceptions import EnvironmentError, RepositoryError
from mutant.logging_utils import configure_logging


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, mutant_logger: logging.Logger,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, mutant_logger: logging.Logger,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_rich_console_raises_environment_error_without_rich(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_console_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("[bold red]Error:[/bold red] boom")
    assert capsys.readouterr().err == "Error: boom\n"


def test_error_boundary_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    with patch("mutant.cli.app.main", side_effect=RepositoryError("git failed", hint="fetch")):
        with pytest.raises(SystemExit) as exc_info:
            cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert capsys.readouterr().err == "Error: git failed\nHint: fetch\n"


def test_logging_without_rich(
    monkeypatch: pytest.MonkeyPatch, mutant_logger: logging.Logger,
) -> None:
    _hide_rich(monkeypatch)

    configure_logging("debug")
    assert mutant_logger.level == logging.DEBUG
