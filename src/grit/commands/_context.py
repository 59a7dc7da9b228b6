"""AppContext — the object every grit command receives via ``@click.pass_obj``.

Built once by the root group from the resolved :class:`GritSettings`. It
owns logging setup, the lazily created :class:`MessageService`, and
:meth:`AppContext.emit`, the single place where results become output
and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from grit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from grit.config.settings import GritSettings
    from grit.services.message import MessageService
    from grit.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by all subcommands."""

    def __init__(self, settings: GritSettings) -> None:
        self.settings = settings
        self._service: MessageService | None = None

        from grit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> MessageService:
        if self._service is None:
            from grit.services.message import MessageService

            self._service = MessageService(self.settings.input)
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        s = self.settings
        return OutputSettings(
            json_output=s.json_output,
            quiet=s.quiet,
            verbose=s.verbose,
            no_color=not s.use_color,
            width=s.output.width,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit with its status.

        Accepted results go to stdout so ``grit format`` can be piped into
        ``git commit -F -``; their warnings go to stderr, and only in rich
        mode. Rejected results go to stderr and end the process with
        status 1.
        """
        out = self.output_settings
        text = format_result(result, settings=out)
        click.echo(text, err=not result.ok)
        if result.ok and not (out.json_output or out.quiet):
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if result.exit_code:
            raise SystemExit(result.exit_code)
