"""Commit kinds and the fixed limits of the conventional commit format."""

from __future__ import annotations

from enum import StrEnum

MAX_DESCRIPTION_LENGTH = 72

BREAKING_CHANGE_KEY = "BREAKING CHANGE"

# Footer keys whose value must reference an issue (contain '#').
ISSUE_FOOTER_KEYS: frozenset[str] = frozenset({"refs", "closes", "fixes"})


class CommitKind(StrEnum):
    """The known conventional commit types, in canonical order."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"

    @classmethod
    def parse(cls, raw: str) -> CommitKind | None:
        """Resolve *raw* case-insensitively, or return None if unknown.

        Examples:
            >>> CommitKind.parse("FEAT")
            <CommitKind.FEAT: 'feat'>
            >>> CommitKind.parse("feature") is None
            True
        """
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


def is_breaking_change_key(key: str) -> bool:
    """True for ``BREAKING CHANGE`` / ``BREAKING-CHANGE`` in any case."""
    return key.strip().upper().replace("-", " ") == BREAKING_CHANGE_KEY


def is_issue_footer_key(key: str) -> bool:
    return key.strip().lower() in ISSUE_FOOTER_KEYS
