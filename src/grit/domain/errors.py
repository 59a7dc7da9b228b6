"""Semantic validation errors raised by the domain layer.

DomainError is a tagged error: ``kind`` says which rule failed and
``value`` carries the offending input (a string, a length, or None)
so callers can show it to the user.
"""

from __future__ import annotations

from enum import StrEnum

from grit.domain.types import MAX_DESCRIPTION_LENGTH, CommitKind


class DomainErrorKind(StrEnum):
    """Every semantic rule a commit message can break."""

    INVALID_COMMIT_TYPE = "INVALID_COMMIT_TYPE"
    EMPTY_DESCRIPTION = "EMPTY_DESCRIPTION"
    DESCRIPTION_TOO_LONG = "DESCRIPTION_TOO_LONG"
    INVALID_SCOPE = "INVALID_SCOPE"
    EMPTY_BODY = "EMPTY_BODY"
    BREAKING_CHANGE_MISMATCH = "BREAKING_CHANGE_MISMATCH"
    EMPTY_BREAKING_CHANGE = "EMPTY_BREAKING_CHANGE"
    DUPLICATE_FOOTER = "DUPLICATE_FOOTER"
    INVALID_ISSUE_REFERENCE = "INVALID_ISSUE_REFERENCE"


def _describe(kind: DomainErrorKind, value: str | int | None) -> str:
    match kind:
        case DomainErrorKind.INVALID_COMMIT_TYPE:
            return f"Invalid commit type '{value}'. Must be one of: {', '.join(CommitKind)}"
        case DomainErrorKind.EMPTY_DESCRIPTION:
            return "Description cannot be empty"
        case DomainErrorKind.DESCRIPTION_TOO_LONG:
            return (
                f"Description is too long ({value} characters). "
                f"Maximum is {MAX_DESCRIPTION_LENGTH} characters"
            )
        case DomainErrorKind.INVALID_SCOPE:
            return (
                f"Invalid scope '{value}'. "
                "Scope must be alphanumeric with hyphens or underscores"
            )
        case DomainErrorKind.EMPTY_BODY:
            return "Body cannot be blank"
        case DomainErrorKind.BREAKING_CHANGE_MISMATCH:
            return (
                "Breaking change mismatch: the header '!' and a "
                "BREAKING CHANGE footer must be present together"
            )
        case DomainErrorKind.EMPTY_BREAKING_CHANGE:
            return "Breaking change description cannot be empty"
        case DomainErrorKind.DUPLICATE_FOOTER:
            return f"Duplicate footer key '{value}'. Footer keys must be unique"
        case DomainErrorKind.INVALID_ISSUE_REFERENCE:
            return f"Invalid issue reference '{value}'. Expected a reference like '#123'"


class DomainError(Exception):
    """A commit message that is well formed but semantically invalid."""

    def __init__(self, kind: DomainErrorKind, value: str | int | None = None) -> None:
        self.kind = kind
        self.value = value
        super().__init__(_describe(kind, value))

    def __repr__(self) -> str:
        return f"DomainError({self.kind}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    # --- constructors, one per kind ---

    @classmethod
    def invalid_commit_type(cls, raw: str) -> DomainError:
        return cls(DomainErrorKind.INVALID_COMMIT_TYPE, raw)

    @classmethod
    def empty_description(cls) -> DomainError:
        return cls(DomainErrorKind.EMPTY_DESCRIPTION)

    @classmethod
    def description_too_long(cls, length: int) -> DomainError:
        return cls(DomainErrorKind.DESCRIPTION_TOO_LONG, length)

    @classmethod
    def invalid_scope(cls, scope: str) -> DomainError:
        return cls(DomainErrorKind.INVALID_SCOPE, scope)

    @classmethod
    def empty_body(cls) -> DomainError:
        return cls(DomainErrorKind.EMPTY_BODY)

    @classmethod
    def breaking_change_mismatch(cls) -> DomainError:
        return cls(DomainErrorKind.BREAKING_CHANGE_MISMATCH)

    @classmethod
    def empty_breaking_change(cls) -> DomainError:
        return cls(DomainErrorKind.EMPTY_BREAKING_CHANGE)

    @classmethod
    def duplicate_footer(cls, key: str) -> DomainError:
        return cls(DomainErrorKind.DUPLICATE_FOOTER, key)

    @classmethod
    def invalid_issue_reference(cls, value: str) -> DomainError:
        return cls(DomainErrorKind.INVALID_ISSUE_REFERENCE, value)
