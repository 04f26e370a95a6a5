"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with ``--traceback``, ``--profile`` and ``--set``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config
from pydantic import ValidationError

from dsa_drills import __init__conf__
from dsa_drills.adapters.config.overrides import apply_overrides
from dsa_drills.adapters.config.settings import DrillsConfigModel, load_drills_settings

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from dsa_drills.composition import AppServices

logger = logging.getLogger(__name__)


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, reporting malformed ones as usage errors."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _load_settings(config: Config) -> DrillsConfigModel:
    """Validate the ``[dsa_drills]`` section, exiting with EX_CONFIG when it is invalid."""
    try:
        return load_drills_settings(config)
    except ValidationError as exc:
        logger.error("Invalid [dsa_drills] configuration", extra={"errors": exc.error_count()})
        click.echo(f"Error: invalid [dsa_drills] configuration\n{exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'classroom', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once and share it, with the services, through the context.

    Example:
        >>> from click.testing import CliRunner
        >>> from dsa_drills.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["run", "fibonacci", "5"], obj=build_testing)
        >>> result.output
        '[0, 1, 1, 2, 3]\\n'
    """
    # ctx.obj is the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _apply_cli_overrides(services.get_config(profile=profile), set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        settings=_load_settings(config),
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from package ancestors, so they register after ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_demo, cli_info, cli_list, cli_run

    for cmd in (cli_info, cli_list, cli_run, cli_demo, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
