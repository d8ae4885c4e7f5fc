"""Infrastructure layer — process, import system and git integration.

This layer wraps all interaction with ``sys``, ``importlib``, entry
points and git subprocesses.  Failures are raised as
:class:`~mutant.exceptions.MutantError` subclasses.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from mutant.infra.bootstrap import bootstrap
from mutant.infra.integration import lookup
from mutant.infra.repository import Diff, SubjectFilter
from mutant.infra.world import World

__all__: list[str] = [
    "Diff",
    "SubjectFilter",
    "World",
    "bootstrap",
    "lookup",
]
