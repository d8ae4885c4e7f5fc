"""Environment bootstrap — turn a parsed configuration into an ``Env``.

Applies the configuration's load-path and import side effects to the
:class:`~mutant.core.protocols.World`, then sets up the configured
integration.  Failures raise :class:`~mutant.exceptions.BootstrapError`;
they are deliberately not part of the parse-phase ``Either`` channel.
"""

from __future__ import annotations

import logging

from mutant.core.models import Config, Env
from mutant.core.protocols import World
from mutant.exceptions import BootstrapError

logger = logging.getLogger(__name__)


def bootstrap(world: World, config: Config) -> Env:
    """Prepare the execution environment for *config*.

    Satisfies the :class:`~mutant.core.protocols.Bootstrap` protocol.

    Raises
    ------
    BootstrapError
        When a required module cannot be imported.
    """
    for directory in config.includes:
        logger.info("Adding %s to load path", directory)
        world.load_path.append(directory)

    for name in config.requires:
        logger.info("Requiring %s", name)
        try:
            world.importlib.import_module(name)
        except ImportError as exc:
            raise BootstrapError(
                f"Could not require {name!r}: {exc}",
                hint="Check --include directories and --require names.",
            ) from exc

    integration = config.integration(config).setup()
    return Env(config=config, world=world, integration=integration)
