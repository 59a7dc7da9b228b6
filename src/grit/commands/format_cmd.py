"""Command: print the canonical rendering of a commit message."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from grit.commands._base import GritCommand, message_source_options, read_message

if TYPE_CHECKING:
    from grit.commands._context import AppContext


@click.command(
    "format",
    cls=GritCommand,
    examples="""\
  grit format "FEAT(ui): tidy header"
  grit format -f .git/COMMIT_EDITMSG | git commit -F -""",
)
@message_source_options
@click.pass_obj
def format_cmd(app: AppContext, message: str | None, message_file: Any) -> None:
    """Print only the canonical message, suitable for piping."""
    text = read_message(message, message_file)
    app.emit(app.service.format(text))
