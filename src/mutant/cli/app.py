"""CLI application entry point and run orchestration for mutant.

:func:`run` sequences *parse arguments* → *bootstrap* → *run* and
reduces the outcome to a boolean.  Only the parse phase is guarded by
the ``Either`` result: bootstrap and runner failures propagate as
exceptions, up to the :func:`cli` error boundary.

Architecture notes
------------------
* No business logic lives here — parsing is delegated to
  :mod:`mutant.cli.options`, everything after it to the injected
  collaborators.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from mutant.cli import exit_codes, options
from mutant.cli.console import console
from mutant.core.either import Left, Right
from mutant.core.models import DEFAULT_CONFIG, Config
from mutant.core.protocols import Bootstrap, Runner, World
from mutant.core.runner import IntegrationRunner
from mutant.exceptions import MutantError
from mutant.infra.bootstrap import bootstrap as default_bootstrap
from mutant.infra.world import World as ProcessWorld
from mutant.logging_utils import configure_logging

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

def run(
    world: World,
    config: Config,
    arguments: Sequence[str],
    *,
    bootstrap: Bootstrap = default_bootstrap,
    runner: Runner = IntegrationRunner(),
) -> bool:
    """Parse *arguments*, bootstrap an environment and run it.

    Returns
    -------
    bool
        The report's ``success``; ``False`` without touching *bootstrap*
        or *runner* when the command line is rejected.
    """
    match options.apply(world, config, arguments):
        case Left(message):
            print(message, file=world.stderr)
            return False
        case Right(parsed):
            env = bootstrap(world, parsed)
            report = runner(env)
            logger.debug("Run finished: success=%s", report.success)
            return report.success


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the mutant CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    configure_logging()
    arguments = sys.argv[1:] if argv is None else argv
    success = run(ProcessWorld(), DEFAULT_CONFIG, arguments)
    return exit_codes.SUCCESS if success else exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MutantError as exc:
        console.error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.interrupted()
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.unexpected(exc)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
