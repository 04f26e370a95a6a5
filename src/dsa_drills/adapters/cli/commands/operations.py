"""Catalogue CLI commands: list, run and demo the algorithm operations.

Contents:
    * :func:`cli_list` - List every operation with its argument kinds.
    * :func:`cli_run` - Run one operation on command-line arguments.
    * :func:`cli_demo` - Run every operation on its sample inputs.
"""

from __future__ import annotations

import logging
import shlex

import lib_log_rich.runtime
import rich_click as click

from dsa_drills.domain.catalogue import DEMO_CASES, OPERATIONS, invoke
from dsa_drills.domain.enums import OutputFormat
from dsa_drills.domain.errors import InvalidArgumentError

from ..constants import CLICK_CONTEXT_SETTINGS, RUN_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ..rendering import render_human, render_json, result_payload

logger = logging.getLogger(__name__)

_FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format; defaults to [dsa_drills].output_format",
)


def _effective_format(cli_ctx: CLIContext, output_format: str | None) -> OutputFormat:
    """Command-line choice wins over the configured default."""
    if output_format:
        return OutputFormat(output_format.lower())
    return cli_ctx.settings.output_format


@click.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_list() -> None:
    """List every operation with its arguments and a one-line summary."""
    with lib_log_rich.runtime.bind(job_id="cli-list", extra={"command": "list"}):
        logger.info("Listing operations", extra={"count": len(OPERATIONS)})
        width = max(len(name) for name in OPERATIONS)
        for operation in OPERATIONS.values():
            click.echo(f"{operation.name.ljust(width)}  {operation.usage:<22}  {operation.summary}")


@click.command("run", context_settings=RUN_CONTEXT_SETTINGS)
@_FORMAT_OPTION
@click.argument("operation")
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli_run(ctx: click.Context, output_format: str | None, operation: str, arguments: tuple[str, ...]) -> None:
    r"""Run OPERATION on ARGUMENTS and print the result.

    Integer sequences are written comma-separated; text with spaces must be
    quoted. See ``list`` for every operation's arguments.

    \b
    Examples:
      dsa-drills run two-sum-complement 4,5,6 10
      dsa-drills run is-palindrome "A man, a plan, a canal: Panama"
    """
    cli_ctx = get_cli_context(ctx)
    fmt = _effective_format(cli_ctx, output_format)

    extra = {"command": "run", "operation": operation, "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-run", extra=extra):
        logger.info("Running operation", extra={"operation": operation, "argument_count": len(arguments)})
        try:
            result = invoke(operation, arguments)
        except InvalidArgumentError as exc:
            logger.warning("Rejected operation arguments", extra={"operation": operation, "reason": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc

        if fmt is OutputFormat.JSON:
            click.echo(render_json(result_payload(operation, arguments, result)))
        else:
            click.echo(render_human(result))


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@_FORMAT_OPTION
@click.pass_context
def cli_demo(ctx: click.Context, output_format: str | None) -> None:
    """Run every operation on its sample inputs."""
    cli_ctx = get_cli_context(ctx)
    fmt = _effective_format(cli_ctx, output_format)

    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo", "format": fmt.value}):
        logger.info("Running demo cases", extra={"count": len(DEMO_CASES)})
        outcomes = [(name, raw, invoke(name, raw)) for name, raw in DEMO_CASES]
        if fmt is OutputFormat.JSON:
            click.echo(render_json([result_payload(name, raw, result) for name, raw, result in outcomes]))
            return
        for name, raw, result in outcomes:
            click.echo(f"{name} {shlex.join(raw)} -> {render_human(result)}")


__all__ = ["cli_demo", "cli_list", "cli_run"]
