"""Commit AST — structurally valid, not semantically validated.

The parser produces these nodes from a token stream. They hold raw
strings only; :meth:`grit.domain.message.Message.from_ast` decides
whether the type is a known kind, whether the scope is well formed, and
whether the breaking-change marker and footer agree.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeaderNode:
    """First line of a commit: ``type(scope)!: description``."""

    type_raw: str
    scope: str | None = None
    breaking_marker_present: bool = False
    description: str = ""


@dataclass(frozen=True)
class BodyNode:
    """Free-text section between the header and the footers."""

    content: str


@dataclass(frozen=True)
class FooterNode:
    """A ``key: value`` trailer line, e.g. ``Refs: #42``."""

    key: str
    value: str


@dataclass(frozen=True)
class CommitAst:
    """Root node. Footers keep their order of appearance."""

    header: HeaderNode
    body: BodyNode | None = None
    footers: tuple[FooterNode, ...] = field(default_factory=tuple)
