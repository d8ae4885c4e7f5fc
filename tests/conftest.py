"""Shared pytest fixtures and configuration for the mutant test suite.

Guidelines
----------
* No git repository, network or real process exit in any test.
* Every side effect goes through a fake world built here.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from mutant.core.models import DEFAULT_CONFIG, Config


@pytest.fixture
def kernel() -> MagicMock:
    """Stand-in for ``sys`` whose ``exit`` does not stop the test."""
    return MagicMock(name="kernel")


@pytest.fixture
def world(kernel: MagicMock) -> MagicMock:
    """World with captured streams and a stubbed kernel."""
    fake = MagicMock(name="world")
    fake.kernel = kernel
    fake.stdout = io.StringIO()
    fake.stderr = io.StringIO()
    fake.load_path = []
    return fake


@pytest.fixture
def config() -> Config:
    return DEFAULT_CONFIG


@pytest.fixture
def mutant_logger() -> Iterator[logging.Logger]:
    """The ``mutant`` logger, restored after the test reconfigures it."""
    logger = logging.getLogger("mutant")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
