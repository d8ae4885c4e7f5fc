"""Integration base class and the built-in null integration.

An integration knows how to execute the target project's test suite.
Concrete integrations ship as separate distributions and are located by
:func:`mutant.infra.integration.lookup`; this module only defines the
contract they implement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mutant.core.models import Config, Env


@dataclass(frozen=True, slots=True)
class TestResult:
    """Outcome of one integration run."""

    __test__ = False  # not a pytest test class

    passed: bool
    """Whether every selected test passed."""

    tests: tuple[str, ...]
    """Identifiers of the tests that were executed."""

    output: str
    """Captured test-suite output."""

    runtime: float
    """Wall-clock seconds spent in the test suite."""


class Integration:
    """Base class for test-suite integrations.

    Parameters
    ----------
    config:
        The run configuration the integration is created for.
    """

    name: str = "base"

    def __init__(self, config: Config) -> None:
        self.config: Config = config

    def setup(self) -> Integration:
        """Prepare the integration (load the test suite).  Returns self."""
        return self

    def call(self, env: Env) -> TestResult:
        """Run the test suite against *env* and report the outcome."""
        raise NotImplementedError


class NullIntegration(Integration):
    """Integration that runs no tests and always passes."""

    name = "null"

    def call(self, env: Env) -> TestResult:
        return TestResult(passed=True, tests=(), output="", runtime=0.0)
