"""Core layer — pure data, result types and orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem, subprocess or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from mutant.core.either import Either, Left, Right
from mutant.core.expression import Expression, ExpressionParser
from mutant.core.integration import Integration, NullIntegration, TestResult
from mutant.core.models import DEFAULT_CONFIG, Config, Env, EnvResult, MatcherConfig
from mutant.core.protocols import Bootstrap, Runner, World
from mutant.core.runner import IntegrationRunner

__all__: list[str] = [
    "DEFAULT_CONFIG",
    "Bootstrap",
    "Config",
    "Either",
    "Env",
    "EnvResult",
    "Expression",
    "ExpressionParser",
    "Integration",
    "IntegrationRunner",
    "Left",
    "MatcherConfig",
    "NullIntegration",
    "Right",
    "Runner",
    "TestResult",
    "World",
]
