"""Rich renderers for ServiceResult: raw buffers verbatim, check as a summary.

Ops whose payload is a message buffer (``format``, ``annotate``,
``template``) bypass Rich entirely and are returned verbatim, so their
output can be piped straight into ``git commit -F -`` or written to a
template file. ``check`` gets a summary plus the canonical message in a
panel, with line counts under ``--verbose``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.text import Text

from grit.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from grit.services.result import ServiceResult

# op -> data key holding the buffer printed as-is
_RAW_TEXT_OPS: dict[str, str] = {
    "format": "message",
    "annotate": "message",
    "template": "template",
}


def raw_text(result: ServiceResult) -> str | None:
    """The verbatim buffer of a successful raw-text op, else None."""
    key = _RAW_TEXT_OPS.get(result.op)
    if not result.ok or key is None:
        return None
    return str(result.data.get(key, "")).rstrip("\n")


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    no_color: bool = False,
) -> str:
    """Render *result* for a human reader.

    Plain text comes back when Rich sees no terminal (pipes, CliRunner).
    """
    text = raw_text(result)
    if text is not None:
        return text

    console = create_console(no_color=no_color, width=width)
    if result.ok:
        _render_check(result, console, verbose)
    else:
        _render_error(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line per result for ``--quiet``; raw-text ops stay verbatim."""
    if not result.ok:
        reason = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {reason}"
    text = raw_text(result)
    return text if text is not None else f"OK: {result.op}"


# ── building blocks ───────────────────────────────────────────────────


def _status(console: Console, label: str, label_style: str, op: str, note: str = "") -> None:
    line = Text.assemble((label, label_style), (f"  {op}", "grit.op"))
    if note:
        line.append(f" — {note}")
    console.print(line)


def _field(console: Console, key: str, value: Any, style: str = "", indent: int = 2) -> None:
    console.print(Text.assemble((f"{' ' * indent}{key}: ", "grit.key"), (str(value), style)))


def _mapping(console: Console, title: str, items: dict[str, Any]) -> None:
    console.print(Text(f"  {title}:", style="dim"))
    for key, value in items.items():
        _field(console, key, value, indent=4)


# ── per-op renderers ──────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    err = result.error
    _status(console, "ERROR", "grit.error", result.op, err.message if err else "Unknown error")
    if err is None:
        return
    _field(console, "code", err.code, style="grit.code")
    if verbose and err.detail:
        _mapping(console, "detail", err.detail)


def _render_check(result: ServiceResult, console: Console, verbose: bool) -> None:
    d = result.data
    _status(console, "OK", "grit.ok", result.op)

    kind = str(d.get("kind", "?"))
    _field(console, "kind", kind, style=style_for_kind(kind))
    if d.get("scope"):
        _field(console, "scope", d["scope"], style="grit.scope")
    if d.get("breaking"):
        _field(console, "breaking", "yes", style="grit.breaking")
    _field(console, "footers", d.get("footer_count", 0))
    if d.get("changed"):
        _field(console, "canonical", "rewritten", style="grit.warning")

    if message := d.get("message"):
        console.print()
        console.print(
            Panel(Text(message), title="commit message", border_style="dim", expand=False)
        )
    if verbose and result.meta:
        console.print()
        _mapping(console, "meta", result.meta)

