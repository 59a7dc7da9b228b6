"""The validated commit Message entity.

INVARIANT: a Message only exists in a valid configuration. The
constructor validates every field; :meth:`Message.from_ast` is the
semantic validator that also checks the header ``!`` marker against the
BREAKING CHANGE footer before calling it. Rebuilding a message with
``dataclasses.replace`` goes through the same checks.

``breaking_change`` is set exactly when the source header carried ``!``
and a BREAKING CHANGE footer was present; it is kept out of ``footers``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from grit.compiler.nodes import CommitAst, FooterNode
from grit.domain.errors import DomainError
from grit.domain.types import (
    BREAKING_CHANGE_KEY,
    MAX_DESCRIPTION_LENGTH,
    CommitKind,
    is_breaking_change_key,
    is_issue_footer_key,
)


@dataclass(frozen=True)
class Footer:
    """A validated trailer other than BREAKING CHANGE."""

    key: str
    value: str


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------


def _check_description(description: str) -> str:
    trimmed = description.strip()
    if not trimmed:
        raise DomainError.empty_description()
    if len(trimmed) > MAX_DESCRIPTION_LENGTH:
        raise DomainError.description_too_long(len(trimmed))
    return trimmed


def _check_scope(scope: str) -> str:
    trimmed = scope.strip()
    if not trimmed or not all(c.isalnum() or c in "-_" for c in trimmed):
        raise DomainError.invalid_scope(scope)
    return trimmed


def _check_body(body: str) -> str:
    trimmed = body.strip()
    if not trimmed:
        raise DomainError.empty_body()
    return trimmed


def _check_breaking_change(text: str) -> str:
    trimmed = text.strip()
    if not trimmed:
        raise DomainError.empty_breaking_change()
    return trimmed


def _check_footers(footers: tuple[Footer, ...]) -> None:
    seen: set[str] = set()
    for footer in footers:
        if is_breaking_change_key(footer.key):
            raise DomainError.duplicate_footer(BREAKING_CHANGE_KEY)
        folded = footer.key.casefold()
        if folded in seen:
            raise DomainError.duplicate_footer(footer.key)
        seen.add(folded)
    for footer in footers:
        if is_issue_footer_key(footer.key) and "#" not in footer.value:
            raise DomainError.invalid_issue_reference(footer.value)


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Message:
    """A conventional commit message that satisfies every domain rule.

    Text fields are stored trimmed.

    Raises:
        DomainError: From the constructor, for the first rule broken.
    """

    kind: CommitKind
    description: str
    scope: str | None = None
    body: str | None = None
    breaking_change: str | None = None
    footers: tuple[Footer, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, CommitKind):
            kind = CommitKind.parse(str(self.kind))
            if kind is None:
                raise DomainError.invalid_commit_type(str(self.kind))
            object.__setattr__(self, "kind", kind)

        object.__setattr__(self, "description", _check_description(self.description))
        if self.scope is not None:
            object.__setattr__(self, "scope", _check_scope(self.scope))
        if self.body is not None:
            object.__setattr__(self, "body", _check_body(self.body))
        if self.breaking_change is not None:
            object.__setattr__(
                self, "breaking_change", _check_breaking_change(self.breaking_change)
            )

        footers = tuple(Footer(f.key.strip(), f.value.strip()) for f in self.footers)
        _check_footers(footers)
        object.__setattr__(self, "footers", footers)

    @property
    def is_breaking(self) -> bool:
        return self.breaking_change is not None

    @classmethod
    def from_ast(cls, ast: CommitAst) -> Message:
        """Validate a parsed commit and build the Message.

        Rules run in a fixed order and the first failure wins: commit
        type, description, scope, body, breaking-change agreement, then
        footer uniqueness and issue references.

        Raises:
            DomainError: For the first rule the AST breaks.
        """
        header = ast.header

        kind = CommitKind.parse(header.type_raw)
        if kind is None:
            raise DomainError.invalid_commit_type(header.type_raw)
        _check_description(header.description)
        if header.scope is not None:
            _check_scope(header.scope)
        if ast.body is not None:
            _check_body(ast.body.content)

        breaking_footers, other_footers = _partition_breaking(ast.footers)
        if len(breaking_footers) > 1:
            raise DomainError.duplicate_footer(BREAKING_CHANGE_KEY)
        if header.breaking_marker_present != bool(breaking_footers):
            raise DomainError.breaking_change_mismatch()
        breaking_change = None
        if breaking_footers:
            breaking_change = _check_breaking_change(breaking_footers[0].value)

        return cls(
            kind=kind,
            scope=header.scope,
            description=header.description,
            body=ast.body.content if ast.body is not None else None,
            breaking_change=breaking_change,
            footers=tuple(Footer(f.key, f.value) for f in other_footers),
        )


def _partition_breaking(
    footers: tuple[FooterNode, ...],
) -> tuple[list[FooterNode], list[FooterNode]]:
    """Split footers into (breaking-change, others), each in original order."""
    breaking: list[FooterNode] = []
    others: list[FooterNode] = []
    for footer in footers:
        (breaking if is_breaking_change_key(footer.key) else others).append(footer)
    return breaking, others
