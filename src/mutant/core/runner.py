"""Core runner — drives one bootstrapped environment to a report.

The runner does not know how tests are executed; it delegates to the
integration bootstrapped into the :class:`~mutant.core.models.Env` and
wraps the outcome into an :class:`~mutant.core.models.EnvResult`.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from mutant.core.models import Env, EnvResult

logger = logging.getLogger(__name__)


class IntegrationRunner:
    """Callable satisfying the :class:`~mutant.core.protocols.Runner` protocol.

    Parameters
    ----------
    clock:
        Monotonic time source, injectable for deterministic tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock: Callable[[], float] = clock

    def __call__(self, env: Env) -> EnvResult:
        config = env.config
        logger.info(
            "Running integration %s (jobs=%s, fail_fast=%s, zombie=%s)",
            env.integration.name,
            config.jobs,
            config.fail_fast,
            config.zombie,
        )
        start = self._clock()
        test_result = env.integration.call(env)
        runtime = self._clock() - start
        logger.debug("Integration finished in %.3fs: passed=%s", runtime, test_result.passed)
        return EnvResult(env=env, test_result=test_result, runtime=runtime)
