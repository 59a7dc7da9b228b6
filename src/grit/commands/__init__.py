"""Subcommand modules for grit.

Provides register_commands() which uses deferred imports to keep
``grit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from grit.commands.annotate import annotate
    from grit.commands.check import check
    from grit.commands.format_cmd import format_cmd
    from grit.commands.template import template

    cli.add_command(check)
    cli.add_command(format_cmd)
    cli.add_command(annotate)
    cli.add_command(template)
