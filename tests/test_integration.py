"""Tests for the integration base classes and registry lookup.

Entry points are patched; no plugin distribution needs to be installed.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from mutant.core.integration import Integration, NullIntegration, TestResult
from mutant.core.models import DEFAULT_CONFIG
from mutant.exceptions import IntegrationLoadError
from mutant.infra.integration import ENTRY_POINT_GROUP, lookup


class PytestIntegration(Integration):
    name = "pytest"


def _entry_point(loaded: object = None, error: Exception | None = None) -> MagicMock:
    entry_point = MagicMock()
    entry_point.value = "mutant_pytest:PytestIntegration"
    if error is not None:
        entry_point.load.side_effect = error
    else:
        entry_point.load.return_value = loaded
    return entry_point


class TestNullIntegration:
    def test_setup_returns_self(self) -> None:
        integration = NullIntegration(DEFAULT_CONFIG)
        assert integration.setup() is integration
        assert integration.config is DEFAULT_CONFIG

    def test_call_passes_without_tests(self) -> None:
        result = NullIntegration(DEFAULT_CONFIG).call(MagicMock())
        assert result == TestResult(passed=True, tests=(), output="", runtime=0.0)

    def test_base_call_is_abstract(self) -> None:
        with pytest.raises(NotImplementedError):
            Integration(DEFAULT_CONFIG).call(MagicMock())


class TestLookup:
    def test_null_is_builtin(self) -> None:
        with patch("mutant.infra.integration.entry_points") as entry_points:
            assert lookup("null") is NullIntegration
        entry_points.assert_not_called()

    def test_entry_point(self) -> None:
        with patch(
            "mutant.infra.integration.entry_points",
            return_value=[_entry_point(PytestIntegration)],
        ) as entry_points:
            assert lookup("pytest") is PytestIntegration
        entry_points.assert_called_once_with(group=ENTRY_POINT_GROUP, name="pytest")

    def test_missing_entry_point(self) -> None:
        with patch("mutant.infra.integration.entry_points", return_value=[]):
            with pytest.raises(IntegrationLoadError, match='"rspec"'):
                lookup("rspec")

    def test_import_failure(self) -> None:
        with patch(
            "mutant.infra.integration.entry_points",
            return_value=[_entry_point(error=ModuleNotFoundError("mutant_pytest"))],
        ):
            with pytest.raises(IntegrationLoadError) as exc_info:
                lookup("pytest")
        assert exc_info.value.hint == "mutant_pytest"

    def test_rejects_non_integration(self) -> None:
        with patch("mutant.infra.integration.entry_points", return_value=[_entry_point(object)]):
            with pytest.raises(IntegrationLoadError, match="pytest"):
                lookup("pytest")

    def test_missing_attribute(self) -> None:
        error = AttributeError("module 'mutant_pytest' has no attribute 'Missing'")
        with patch("mutant.infra.integration.entry_points", return_value=[_entry_point(error=error)]):
            with pytest.raises(IntegrationLoadError, match='"pytest"') as exc_info:
                lookup("pytest")
        assert exc_info.value.hint == str(error)
