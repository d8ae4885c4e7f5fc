"""Tests for the run orchestrator (cli/app.py ``run``).

Parser, bootstrap and runner are mocked so the tests verify only the
sequencing: parse → bootstrap → run → ``success``.
"""

from __future__ import annotations

from unittest.mock import MagicMock, call, patch

import pytest

from mutant.cli.app import run
from mutant.core.either import Left, Right
from mutant.core.models import Config
from mutant.exceptions import BootstrapError


def _collaborators(success: bool = True) -> tuple[MagicMock, MagicMock, MagicMock]:
    """Return (bootstrap, runner, report) mocks wired together."""
    report = MagicMock(name="report")
    report.success = success
    bootstrap = MagicMock(name="bootstrap", return_value=MagicMock(name="env"))
    runner = MagicMock(name="runner", return_value=report)
    return bootstrap, runner, report


class TestRunSequence:
    def test_performs_calls_in_expected_sequence(self, world: MagicMock, config: Config) -> None:
        arguments = ["TestApp*"]
        parsed = MagicMock(name="parsed config")
        bootstrap, runner, _report = _collaborators()
        manager = MagicMock()
        manager.attach_mock(bootstrap, "bootstrap")
        manager.attach_mock(runner, "runner")

        with patch("mutant.cli.options.apply", return_value=Right(parsed)) as apply:
            manager.attach_mock(apply, "apply")
            run(world, config, arguments, bootstrap=bootstrap, runner=runner)

        assert manager.mock_calls == [
            call.apply(world, config, arguments),
            call.bootstrap(world, parsed),
            call.runner(bootstrap.return_value),
        ]

    def test_report_success_is_returned(self, world: MagicMock, config: Config) -> None:
        bootstrap, runner, _report = _collaborators(success=True)
        assert run(world, config, ["TestApp*"], bootstrap=bootstrap, runner=runner) is True

    def test_report_failure_is_returned(self, world: MagicMock, config: Config) -> None:
        bootstrap, runner, _report = _collaborators(success=False)
        assert run(world, config, ["TestApp*"], bootstrap=bootstrap, runner=runner) is False

    def test_bootstrap_receives_parsed_config(self, world: MagicMock, config: Config) -> None:
        bootstrap, runner, _report = _collaborators()
        run(world, config, ["--fail-fast", "TestApp*"], bootstrap=bootstrap, runner=runner)

        (_world, parsed), _kwargs = bootstrap.call_args
        assert parsed.fail_fast is True
        assert config.fail_fast is False


class TestRunParseFailure:
    def test_prints_error_and_fails(self, world: MagicMock, config: Config) -> None:
        bootstrap, runner, _report = _collaborators()
        with patch("mutant.cli.options.apply", return_value=Left("cli-error")):
            result = run(world, config, ["anything"], bootstrap=bootstrap, runner=runner)

        assert result is False
        assert world.stderr.getvalue() == "cli-error\n"
        assert world.stdout.getvalue() == ""
        bootstrap.assert_not_called()
        runner.assert_not_called()

    def test_empty_arguments_fail(self, world: MagicMock, config: Config) -> None:
        bootstrap, runner, _report = _collaborators()
        assert run(world, config, [], bootstrap=bootstrap, runner=runner) is False
        assert world.stderr.getvalue() == "No expressions given\n"
        bootstrap.assert_not_called()
        runner.assert_not_called()

    def test_invalid_option_fails(self, world: MagicMock, config: Config) -> None:
        bootstrap, runner, _report = _collaborators()
        assert run(world, config, ["--invalid", "TestApp*"], bootstrap=bootstrap, runner=runner) is False
        assert world.stderr.getvalue() == "invalid option: --invalid\n"


class TestRunDownstreamFailures:
    def test_bootstrap_errors_propagate(self, world: MagicMock, config: Config) -> None:
        bootstrap = MagicMock(side_effect=BootstrapError("boom"))
        runner = MagicMock()
        with pytest.raises(BootstrapError, match="boom"):
            run(world, config, ["TestApp*"], bootstrap=bootstrap, runner=runner)
        runner.assert_not_called()

    def test_runner_errors_propagate(self, world: MagicMock, config: Config) -> None:
        bootstrap = MagicMock()
        runner = MagicMock(side_effect=RuntimeError("crash"))
        with pytest.raises(RuntimeError, match="crash"):
            run(world, config, ["TestApp*"], bootstrap=bootstrap, runner=runner)


class TestRunDefaults:
    def test_default_collaborators_with_null_integration(self, world: MagicMock, config: Config) -> None:
        world.importlib = MagicMock()
        assert run(world, config, ["--include", "lib", "TestApp*"]) is True
        assert world.load_path == ["lib"]
