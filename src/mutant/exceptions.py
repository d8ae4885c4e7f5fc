"""Custom exception hierarchy for mutant.

Expected, user-correctable problems found while parsing the command line
never raise: they travel as :class:`~mutant.core.either.Left` values.
The exceptions below are reserved for failures past that point
(bootstrap, integration loading, repository access) and are allowed to
propagate up to the CLI error boundary.

Hierarchy
---------
MutantError
├── EitherError
├── IntegrationLoadError
├── BootstrapError
├── RepositoryError
└── EnvironmentError
"""

from __future__ import annotations


class MutantError(Exception):
    """Base exception for all mutant errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Result type -----------------------------------------------------------

class EitherError(MutantError):
    """Raised when the wrong side of an ``Either`` is unwrapped."""


# --- Integrations ----------------------------------------------------------

class IntegrationLoadError(MutantError):
    """Raised when an integration cannot be found or imported."""

    def __init__(self, name: str, *, hint: str | None = None) -> None:
        super().__init__(
            f'Could not load integration "{name}" '
            f"(you may want to try installing the gem mutant-{name})",
            hint=hint,
        )
        self.name: str = name


# --- Environment bootstrap -------------------------------------------------

class BootstrapError(MutantError):
    """Raised when the execution environment cannot be prepared."""


# --- Repository ------------------------------------------------------------

class RepositoryError(MutantError):
    """Raised when a git command used for subject filtering fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(MutantError):
    """Raised when an optional runtime dependency is not available."""
