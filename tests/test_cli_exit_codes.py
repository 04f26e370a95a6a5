"""Exit code values and their use at the CLI boundary."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from dsa_drills.adapters import cli as cli_mod
from dsa_drills.adapters.cli.exit_codes import ExitCode


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "value"),
    [
        (ExitCode.SUCCESS, 0),
        (ExitCode.GENERAL_ERROR, 1),
        (ExitCode.INVALID_ARGUMENT, 22),
        (ExitCode.CONFIG_ERROR, 78),
        (ExitCode.SIGNAL_INT, 130),
        (ExitCode.BROKEN_PIPE, 141),
        (ExitCode.SIGNAL_TERM, 143),
    ],
)
def test_exit_codes_follow_posix_conventions(member: ExitCode, value: int) -> None:
    assert member == value


@pytest.mark.os_agnostic
def test_when_config_section_is_invalid_it_exits_with_code_22(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "nonexistent_section_that_does_not_exist"], obj=production_factory
    )

    assert result.exit_code == 22


@pytest.mark.os_agnostic
def test_when_operation_is_unknown_it_exits_with_code_22(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
    logging_runtime_reset: None,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["run", "quick-sort", "3,1,2"], obj=testing_factory)

    assert result.exit_code == 22


@pytest.mark.os_agnostic
def test_when_drills_section_is_invalid_it_exits_with_code_78(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"dsa_drills": {"output_format": 3}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["list"], obj=factory)

    assert result.exit_code == 78
