"""The ``grit`` entry point: global flags, settings resolution, subcommands."""

from __future__ import annotations

import click

from grit import __version__
from grit.commands import register_commands
from grit.commands._context import AppContext
from grit.config.settings import GritSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="grit")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One-line results only.")
@click.option("-v", "--verbose", is_flag=True, help="Show error detail and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("--no-color", is_flag=True, help="Disable coloured output.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="PATH",
    help="Config file to use instead of grit.toml discovery.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """grit — check and canonicalize conventional commit messages.

    Pass the message as an argument or with -f/--file ('-' reads stdin).
    Exits with status 1 when a message is rejected.
    """
    # Unset flags are left out so GRIT_* env vars and the config file still apply.
    enabled = {name: True for name, value in flags.items() if value}
    settings = GritSettings.from_cli(config_path=config_path, **enabled)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
