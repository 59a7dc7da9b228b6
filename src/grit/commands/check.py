"""Command: validate a commit message."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from grit.commands._base import GritCommand, message_source_options, read_message

if TYPE_CHECKING:
    from grit.commands._context import AppContext


@click.command(
    cls=GritCommand,
    examples="""\
  grit check "feat(api): add pagination"
  grit check --file .git/COMMIT_EDITMSG
  git log -1 --format=%B | grit check -f -
  grit --json check "fix: handle empty input\"""",
)
@message_source_options
@click.pass_obj
def check(app: AppContext, message: str | None, message_file: Any) -> None:
    """Validate a commit message and show its canonical form.

    Exits with status 1 if the message is rejected.
    """
    text = read_message(message, message_file)
    app.emit(app.service.check(text))
