"""Command: annotate a rejected message buffer for re-editing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from grit.commands._base import GritCommand, message_source_options, read_message

if TYPE_CHECKING:
    from grit.commands._context import AppContext


@click.command(
    cls=GritCommand,
    examples="""\
  grit annotate -f .git/COMMIT_EDITMSG
  grit annotate "feat add login\"""",
)
@message_source_options
@click.pass_obj
def annotate(app: AppContext, message: str | None, message_file: Any) -> None:
    """Print the message with a comment block explaining why it was rejected.

    Valid messages are printed in canonical form instead.
    """
    text = read_message(message, message_file)
    app.emit(app.service.annotate(text))
