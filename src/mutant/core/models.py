"""Domain models for mutant.

All models are **frozen** dataclasses — immutable value objects updated
only by whole-value replacement (:func:`dataclasses.replace`).  The
option parser derives a new :class:`Config` per option and never
mutates the baseline it was given.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mutant.core.expression import Expression, ExpressionParser
from mutant.core.integration import Integration, NullIntegration, TestResult

if TYPE_CHECKING:
    from mutant.core.protocols import World


# ---------------------------------------------------------------------------
# Matcher configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MatcherConfig:
    """Which subjects are eligible for mutation."""

    match_expressions: tuple[Expression, ...] = ()
    """Subjects to select.  At least one is required for a run."""

    ignore_expressions: tuple[Expression, ...] = ()
    """Subjects to skip when an expression matches them as prefix."""

    subject_filters: tuple[Callable[[Any], bool], ...] = ()
    """Additional predicates every selected subject must satisfy."""


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Config:
    """Accumulated settings for a single mutant run."""

    includes: tuple[str, ...] = ()
    """Directories appended to the load path, in order."""

    requires: tuple[str, ...] = ()
    """Modules imported before the run, in order."""

    jobs: int | None = None
    """Number of kill jobs, or ``None`` to let the runner decide."""

    fail_fast: bool = False

    zombie: bool = False
    """Run mutant against a renamed copy of itself."""

    integration: type[Integration] = NullIntegration
    """How tests get executed."""

    matcher: MatcherConfig = field(default_factory=MatcherConfig)

    expression_parser: ExpressionParser = field(default_factory=ExpressionParser)
    """Parser for match and ignore expressions."""


DEFAULT_CONFIG: Config = Config()
"""Baseline configuration handed to the option parser by ``main()``."""


# ---------------------------------------------------------------------------
# Environment and report
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Env:
    """Bootstrapped execution environment."""

    config: Config
    world: World
    integration: Integration


@dataclass(frozen=True, slots=True)
class EnvResult:
    """Report produced by the runner for one environment."""

    env: Env
    test_result: TestResult
    runtime: float
    """Wall-clock seconds spent by the runner."""

    @property
    def success(self) -> bool:
        """Whether the run should be considered successful."""
        return self.test_result.passed
