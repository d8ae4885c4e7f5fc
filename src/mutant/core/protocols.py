"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts the infrastructure collaborators must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

import subprocess
from types import ModuleType
from typing import Any, Protocol, TextIO

from mutant.core.models import Config, Env


class Kernel(Protocol):
    """Process-level capabilities (``sys`` satisfies this structurally)."""

    def exit(self, status: int = 0) -> Any:
        """Terminate the process with *status*."""
        ...  # pragma: no cover


class World(Protocol):
    """Execution context shared by the parser and its collaborators.

    Abstracts the process-exit capability, the output streams, the
    module load path and the ability to run external commands so that
    every side effect can be replaced in tests.
    """

    kernel: Kernel
    stdout: TextIO
    stderr: TextIO
    load_path: list[str]
    importlib: ModuleType

    def capture(self, *command: str) -> subprocess.CompletedProcess[str]:
        """Run *command* and return the completed process with text output."""
        ...  # pragma: no cover

    def system(self, *command: str) -> bool:
        """Run *command* discarding its output; return whether it succeeded."""
        ...  # pragma: no cover


class Report(Protocol):
    """Anything exposing a boolean ``success``."""

    @property
    def success(self) -> bool:
        ...  # pragma: no cover


class Bootstrap(Protocol):
    """Builds an :class:`~mutant.core.models.Env` from a configuration.

    Failures are raised, not returned: they are not part of the
    parse-phase error channel.
    """

    def __call__(self, world: World, config: Config) -> Env:
        ...  # pragma: no cover


class Runner(Protocol):
    """Executes a bootstrapped environment and reports the outcome."""

    def __call__(self, env: Env) -> Report:
        ...  # pragma: no cover
