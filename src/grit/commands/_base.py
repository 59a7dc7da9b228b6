"""Custom Click base classes with --examples support.

GritCommand accepts an ``examples`` parameter. When ``--examples`` is
passed, the command prints usage examples and exits. This keeps
``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class GritCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def message_source_options(func: Any) -> Any:
    """Add the ``MESSAGE`` argument and ``-f/--file`` option to a command."""
    func = click.option(
        "-f",
        "--file",
        "message_file",
        type=click.File("r", encoding="utf-8"),
        default=None,
        help="Read the message from a file ('-' for stdin).",
    )(func)
    return click.argument("message", required=False)(func)


def read_message(message: str | None, message_file: Any) -> str:
    """Resolve the message text from the argument or the file option."""
    if message is not None and message_file is not None:
        msg = "Pass the message as an argument or with --file, not both."
        raise click.UsageError(msg)
    if message_file is not None:
        return str(message_file.read())
    if message is None:
        msg = "No message given. Pass it as an argument or use --file."
        raise click.UsageError(msg)
    return message
