"""Command-line option parsing into a :class:`~mutant.core.models.Config`.

:func:`apply` scans the argument tokens left to right against the fixed
:data:`OPTIONS` table.  Every option handler takes the current
configuration and returns a *new* one (or an error message) — the
baseline passed in is never mutated.

Parsing never raises for bad input: every problem becomes a
:class:`~mutant.core.either.Left` carrying a one-line message, and the
first problem encountered wins.

Token forms
-----------
* ``--include DIR``, ``--include=DIR``, ``-I DIR``, ``-IDIR``
* ``--`` ends option scanning; everything after it is positional.
* Any other token not starting with ``-`` (or a lone ``-``) is a match
  expression.
"""

from __future__ import annotations

import enum
import logging
import re
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from mutant.core.either import Either, Left, Right
from mutant.core.expression import Expression, ExpressionParser
from mutant.core.models import Config
from mutant.core.protocols import World
from mutant.exceptions import IntegrationLoadError
from mutant.infra import integration as integration_registry
from mutant.infra.repository import HEAD, Diff, SubjectFilter
from mutant.version import VERSION

logger = logging.getLogger(__name__)

BANNER: str = "usage: mutant [options] MATCH_EXPRESSION ..."
SECTIONS: tuple[str, ...] = ("Environment", "Options")
NO_EXPRESSIONS: str = "No expressions given"

_SUMMARY_INDENT = "    "
_SUMMARY_WIDTH = 32
_INTEGER = re.compile(r"-?[0-9]+")

Handler = Callable[[World, Config, str, "str | None"], Either[str, Config]]


class ScanState(enum.Enum):
    """State of the left-to-right token scan."""

    SCANNING = "scanning"
    HALTED = "halted"


@dataclass(frozen=True, slots=True)
class Option:
    """One row of the option table."""

    long: str
    description: str
    handler: Handler
    section: str
    short: str | None = None
    metavar: str | None = None
    """Name of the option's argument; ``None`` for flags without one."""
    terminal: bool = False
    """Stop scanning after this option (explicit exit)."""

    @property
    def takes_argument(self) -> bool:
        return self.metavar is not None

    @property
    def switch(self) -> str:
        """Left column of the usage text, e.g. ``-I, --include DIRECTORY``."""
        spelling = f"{self.short}, {self.long}" if self.short else f"    {self.long}"
        return f"{spelling} {self.metavar}" if self.metavar else spelling


# ---------------------------------------------------------------------------
# Option handlers
# ---------------------------------------------------------------------------

def _add_include(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    return Right(replace(config, includes=(*config.includes, value)))


def _add_require(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    return Right(replace(config, requires=(*config.requires, value)))


def _set_jobs(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    # ASCII digits only; no padding or underscores
    if value is None or not _INTEGER.fullmatch(value):
        return Left(f"invalid argument: {flag} {value}")
    return Right(replace(config, jobs=int(value)))


def _use_integration(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    return (
        Either.wrap_error(
            lambda: integration_registry.lookup(value),
            IntegrationLoadError,
            ImportError,
        )
        .lmap(lambda _exc: f"invalid argument: {flag} {IntegrationLoadError(value)}")
        .fmap(lambda integration: replace(config, integration=integration))
    )


def _add_ignore_expression(
    world: World, config: Config, flag: str, value: str | None,
) -> Either[str, Config]:
    matcher = config.matcher
    return config.expression_parser.parse(value).fmap(
        lambda expression: replace(
            config,
            matcher=replace(
                matcher,
                ignore_expressions=(*matcher.ignore_expressions, expression),
            ),
        )
    )


def _add_since_filter(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    matcher = config.matcher
    subject_filter = SubjectFilter(Diff(world=world, from_rev=HEAD, to_rev=value))
    return Right(
        replace(
            config,
            matcher=replace(matcher, subject_filters=(*matcher.subject_filters, subject_filter)),
        )
    )


def _enable_fail_fast(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    return Right(replace(config, fail_fast=True))


def _enable_zombie(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    return Right(replace(config, zombie=True))


def _print_version(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    print(f"mutant-{VERSION}", file=world.stdout)
    world.kernel.exit(0)
    return Right(config)


def _print_help(world: World, config: Config, flag: str, value: str | None) -> Either[str, Config]:
    print(usage(), file=world.stdout)
    world.kernel.exit(0)
    return Right(config)


# ---------------------------------------------------------------------------
# Option table
# ---------------------------------------------------------------------------

OPTIONS: tuple[Option, ...] = (
    Option("--zombie", "Run mutant zombified", _enable_zombie, "Environment"),
    Option(
        "--include", "Add DIRECTORY to $LOAD_PATH", _add_include, "Environment",
        short="-I", metavar="DIRECTORY",
    ),
    Option(
        "--require", "Require file with NAME", _add_require, "Environment",
        short="-r", metavar="NAME",
    ),
    Option(
        "--jobs", "Number of kill jobs. Defaults to number of processors.", _set_jobs,
        "Environment", short="-j", metavar="NUMBER",
    ),
    Option(
        "--use", "Use INTEGRATION to kill mutations", _use_integration, "Options",
        metavar="INTEGRATION",
    ),
    Option(
        "--ignore-subject", "Ignore subjects that match EXPRESSION as prefix",
        _add_ignore_expression, "Options", metavar="EXPRESSION",
    ),
    Option(
        "--since", "Only select subjects touched since REVISION", _add_since_filter,
        "Options", metavar="REVISION",
    ),
    Option("--fail-fast", "Fail fast", _enable_fail_fast, "Options"),
    Option("--version", "Print mutants version", _print_version, "Options", terminal=True),
    Option("--help", "Show this message", _print_help, "Options", short="-h", terminal=True),
)

_BY_LONG: dict[str, Option] = {option.long: option for option in OPTIONS}
_BY_SHORT: dict[str, Option] = {option.short: option for option in OPTIONS if option.short}


def usage() -> str:
    """Render the ``--help`` text from :data:`OPTIONS`."""
    lines = [BANNER]
    for index, section in enumerate(SECTIONS):
        if index:
            lines.append("")
        lines.append(f"{section}:")
        lines.extend(
            f"{_SUMMARY_INDENT}{option.switch:<{_SUMMARY_WIDTH}} {option.description}"
            for option in OPTIONS
            if option.section == section
        )
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------

def apply(world: World, config: Config, arguments: Sequence[str]) -> Either[str, Config]:
    """Parse *arguments* on top of the baseline *config*.

    Returns
    -------
    Either[str, Config]
        ``Right`` with the derived configuration, or ``Left`` with the
        message of the first problem encountered.

    Notes
    -----
    ``--help`` and ``--version`` print, invoke ``world.kernel.exit`` and
    halt the scan: no later token is looked at, the match-expression
    requirement is waived, and the configuration built so far is
    returned as ``Right``.
    """
    state = ScanState.SCANNING
    tokens = deque(arguments)
    positionals: list[str] = []

    while tokens and state is ScanState.SCANNING:
        token = tokens.popleft()

        if token == "--":
            positionals.extend(tokens)
            tokens.clear()
            continue

        if not _is_flag(token):
            positionals.append(token)
            continue

        match _resolve(token, tokens):
            case Left() as error:
                return error
            case Right((option, flag, value)):
                logger.debug("Applying option %s %s", flag, "" if value is None else value)

        match option.handler(world, config, flag, value):
            case Left() as error:
                return error
            case Right(config):
                pass

        if option.terminal:
            state = ScanState.HALTED

    if not positionals:
        if state is ScanState.HALTED:
            return Right(config)
        return Left(NO_EXPRESSIONS)

    matcher = config.matcher
    return _parse_expressions(config.expression_parser, positionals).fmap(
        lambda expressions: replace(config, matcher=replace(matcher, match_expressions=expressions))
    )


def _is_flag(token: str) -> bool:
    return token.startswith("-") and token != "-"


def _resolve(token: str, tokens: deque[str]) -> Either[str, tuple[Option, str, str | None]]:
    """Find the option *token* names and its value, consuming from *tokens*."""
    if token.startswith("--"):
        flag, separator, attached = token.partition("=")
        option = _BY_LONG.get(flag)
        if option is None:
            return Left(f"invalid option: {token}")
        if separator and not option.takes_argument:
            return Left(f"needless argument: {token}")
        value = attached if separator else None
    else:
        flag, attached = token[:2], token[2:]
        option = _BY_SHORT.get(flag)
        if option is None or (attached and not option.takes_argument):
            return Left(f"invalid option: {token}")
        value = attached or None

    if option.takes_argument and value is None:
        if not tokens:
            return Left(f"missing argument: {flag}")
        value = tokens.popleft()

    return Right((option, flag, value))


def _parse_expressions(
    parser: ExpressionParser, texts: Sequence[str],
) -> Either[str, tuple[Expression, ...]]:
    expressions: list[Expression] = []
    for text in texts:
        match parser.parse(text):
            case Left() as error:
                return error
            case Right(expression):
                expressions.append(expression)
    return Right(tuple(expressions))
