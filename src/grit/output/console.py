"""Rich console and theme for grit's human-readable output.

Consoles render into a StringIO so renderers can return plain strings;
the CLI decides where they go. Rich drops colour on its own when the
process is not attached to a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 100

# Kinds that change behaviour get a stronger colour than housekeeping kinds.
_KIND_STYLES: dict[str, str] = {
    "feat": "bold green",
    "fix": "bold yellow",
    "perf": "bold blue",
    "revert": "bold red",
    "refactor": "magenta",
}

GRIT_THEME = Theme(
    {
        "grit.ok": "bold green",
        "grit.error": "bold red",
        "grit.warning": "bold yellow",
        "grit.op": "bold cyan",
        "grit.key": "dim",
        "grit.kind": "bold",
        "grit.scope": "cyan",
        "grit.breaking": "bold red",
        "grit.code": "bold yellow",
        **{f"grit.kind.{kind}": style for kind, style in _KIND_STYLES.items()},
    }
)


def style_for_kind(kind: str) -> str:
    """Theme style for a commit kind; housekeeping kinds share ``grit.kind``."""
    return f"grit.kind.{kind}" if kind in _KIND_STYLES else "grit.kind"


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing to a fresh StringIO buffer.

    Args:
        no_color: Strip styles even on a terminal (``--no-color``).
        width: Wrap width for panels and fields; defaults to 100.
    """
    return Console(
        file=StringIO(),
        theme=GRIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to *console* so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
