"""Commit message template and comment handling for editor buffers.

Comment lines start with ``#`` (after optional indentation) and are
dropped before a buffer is compiled, the same way git treats them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grit.compiler.lexer import split_lines
from grit.domain.types import CommitKind

if TYPE_CHECKING:
    from grit.compiler.errors import CompileError

COMMENT_CHAR = "#"

COMMIT_TEMPLATE = f"""\
# --- grit: conventional commit ---
#
# Format:   type(scope)!: description
#
# Types:    {"  ".join(CommitKind)}
# Scope:    optional; letters, digits, hyphens, underscores, e.g. (auth)
# Breaking: add '!' before ':' AND a 'BREAKING CHANGE: ...' footer
# Length:   description at most 72 characters
#
# --- Example ---
# feat(auth)!: add OAuth 2.0 login
#
# Migrated from session-based auth to OAuth 2.0.
#
# BREAKING CHANGE: session cookies are no longer valid
# Refs: #142
# ---
# Lines starting with '#' are ignored.
"""


def strip_comments(text: str, comment_char: str = COMMENT_CHAR) -> str:
    """Drop comment lines and trim the result.

    Examples:
        >>> strip_comments("feat: x\\n# note\\n\\nbody\\n  # indented")
        'feat: x\\n\\nbody'
    """
    kept = [line for line in split_lines(text) if not line.lstrip().startswith(comment_char)]
    return "\n".join(kept).strip()


def annotate_error(
    text: str,
    error: CompileError,
    comment_char: str = COMMENT_CHAR,
) -> str:
    """Prepend a comment block describing *error* to a message buffer.

    Existing comments are removed first, so annotating the same buffer
    twice leaves a single block.
    """
    c = comment_char
    notes = [
        f"{c} grit: message rejected ({error.stage} stage, {error.code})",
        f"{c}   {error}",
        f"{c} Fix the message below; lines starting with '{c}' are ignored.",
    ]
    body = strip_comments(text, c)
    return "\n".join(notes) + ("\n\n" + body if body else "") + "\n"
