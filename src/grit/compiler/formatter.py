"""Formatter — validated Message to its canonical text.

Layout::

    type(scope)!: description
    <blank>
    body, greedily wrapped at 72 columns
    <blank>
    BREAKING CHANGE: ...
    Key: value

Sections that are absent are skipped together with their blank line.
Formatting is total: every constructed Message renders.
"""

from __future__ import annotations

from grit.domain.message import Footer, Message
from grit.domain.types import BREAKING_CHANGE_KEY

WRAP_WIDTH = 72


def format_message(message: Message) -> str:
    """Render *message* in canonical form."""
    sections = [format_header(message)]
    if message.body is not None:
        sections.append(wrap_text(message.body))
    footer_lines = [f"{f.key}: {f.value}" for f in order_footers(message)]
    if footer_lines:
        sections.append("\n".join(footer_lines))
    return "\n\n".join(sections)


def format_header(message: Message) -> str:
    scope = f"({message.scope})" if message.scope is not None else ""
    marker = "!" if message.is_breaking else ""
    return f"{message.kind}{scope}{marker}: {message.description}"


def order_footers(message: Message) -> list[Footer]:
    """BREAKING CHANGE first, then the other footers in their original order."""
    ordered: list[Footer] = []
    if message.breaking_change is not None:
        ordered.append(Footer(BREAKING_CHANGE_KEY, message.breaking_change))
    ordered.extend(message.footers)
    return ordered


def wrap_text(text: str, width: int = WRAP_WIDTH) -> str:
    """Greedy word wrap. Whitespace runs separate words; words are never split.

    Examples:
        >>> wrap_text("one  two\\nthree", width=9)
        'one two\\nthree'
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return "\n".join(lines)
