"""Command: print the commit message template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from grit.commands._base import GritCommand

if TYPE_CHECKING:
    from grit.commands._context import AppContext


@click.command(
    cls=GritCommand,
    examples="""\
  grit template > .gitmessage
  git config commit.template .gitmessage""",
)
@click.pass_obj
def template(app: AppContext) -> None:
    """Print a commented template describing the message format."""
    app.emit(app.service.template())
