"""Root CLI group for resname with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from resname import __version__
from resname.commands import register_commands
from resname.commands._base import ResnameGroup
from resname.commands._context import AppContext
from resname.config.settings import ResnameSettings


@click.group(cls=ResnameGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="resname")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--max-length",
    type=click.IntRange(min=1),
    default=None,
    help="Byte limit for names (default 255, or RESNAME_MAX_LENGTH).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    max_length: int | None,
) -> None:
    """resname — resource name validation."""
    # Unset flags pass None so RESNAME_* env vars can still apply.
    try:
        settings = ResnameSettings.from_cli(
            json_output=json_output or None,
            quiet=quiet or None,
            verbose=verbose or None,
            log_json=log_json or None,
            max_length=max_length,
        )
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint="settings") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
