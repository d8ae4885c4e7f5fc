"""Integration registry — resolve an integration class by name.

Third-party integrations register themselves under the
``mutant.integrations`` entry-point group, e.g. in their
``pyproject.toml``::

    [project.entry-points."mutant.integrations"]
    pytest = "mutant_pytest:PytestIntegration"

Every failure to locate or import an integration is re-raised as
:class:`~mutant.exceptions.IntegrationLoadError`.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points

from mutant.core.integration import Integration, NullIntegration
from mutant.exceptions import IntegrationLoadError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP: str = "mutant.integrations"

_BUILTIN: dict[str, type[Integration]] = {
    NullIntegration.name: NullIntegration,
}


def lookup(name: str) -> type[Integration]:
    """Return the integration class registered as *name*.

    Raises
    ------
    IntegrationLoadError
        When no integration is registered under *name*, or loading it
        fails.
    """
    if name in _BUILTIN:
        return _BUILTIN[name]

    candidates = entry_points(group=ENTRY_POINT_GROUP, name=name)
    if not candidates:
        logger.debug("No entry point %r in group %s", name, ENTRY_POINT_GROUP)
        raise IntegrationLoadError(name)

    entry_point = next(iter(candidates))
    try:
        integration = entry_point.load()
    except (ImportError, AttributeError) as exc:
        raise IntegrationLoadError(name, hint=str(exc)) from exc

    if not (isinstance(integration, type) and issubclass(integration, Integration)):
        raise IntegrationLoadError(
            name,
            hint=f"{entry_point.value} is not an Integration subclass.",
        )

    logger.debug("Loaded integration %r from %s", name, entry_point.value)
    return integration
