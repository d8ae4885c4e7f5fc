"""Concrete execution context backed by the running process.

:class:`World` bundles every process-level capability the parser and
its collaborators touch — exit, standard streams, the module load path,
the importer and external commands — so that tests can substitute each
one independently.
"""

from __future__ import annotations

import importlib
import logging
import subprocess
import sys
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class World:
    """Satisfies :class:`~mutant.core.protocols.World` structurally."""

    kernel: Any = sys
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    load_path: list[str] = field(default_factory=lambda: sys.path)
    importlib: ModuleType = importlib
    subprocess: ModuleType = subprocess

    def capture(self, *command: str) -> subprocess.CompletedProcess[str]:
        """Run *command*, capturing stdout and stderr as text."""
        logger.debug("Running: %s", " ".join(command))
        return self.subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            check=False,
        )

    def system(self, *command: str) -> bool:
        """Run *command* with its output discarded."""
        logger.debug("Running: %s", " ".join(command))
        result = self.subprocess.run(
            list(command),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        return result.returncode == 0
