"""Lexer — raw commit text to a flat token sequence.

Structure of the input:

- Header: line 0, ``type(scope)!: description``.
- Body: optional free text after the blank line(s) following the header.
- Footers: every line from the first line that looks like a footer on.

The lexer checks structure only. Unknown types, long descriptions and
odd scope characters tokenize fine and are rejected by the domain layer.
"""

from __future__ import annotations

import logging

from grit.compiler.errors import LexError
from grit.compiler.tokens import Token

logger = logging.getLogger(__name__)

FOOTER_SEPARATORS: tuple[str, ...] = (": ", " #")

_BREAKING_PREFIXES: tuple[str, ...] = ("BREAKING CHANGE:", "BREAKING-CHANGE:")


def tokenize(text: str) -> tuple[Token, ...]:
    """Tokenize *text* into ``TYPE [SCOPE] [BREAKING_MARKER] DESCRIPTION ...``.

    Raises:
        LexError: If the header is structurally malformed.
    """
    lines = split_lines(text)
    header = lines[0] if lines else ""

    tokens: list[Token] = [*tokenize_header(header), Token.line_break()]

    i = 1
    while i < len(lines) and not lines[i].strip():
        i += 1
    remaining = lines[i:]

    footer_start = next(
        (idx for idx, line in enumerate(remaining) if is_footer_line(line)),
        len(remaining),
    )
    body_text = "\n".join(remaining[:footer_start]).rstrip()
    if body_text:
        tokens.extend((Token.body(body_text), Token.line_break()))

    for line in remaining[footer_start:]:
        if line.strip():
            tokens.extend((Token.footer(line.strip()), Token.line_break()))

    tokens.append(Token.end_of_input())
    logger.debug("Tokenized %d lines into %d tokens", len(lines), len(tokens))
    return tuple(tokens)


def split_lines(text: str) -> list[str]:
    """Split on newlines only, dropping a trailing carriage return per line.

    Form feeds, \\x85 and the Unicode line separators are ordinary
    characters inside a line.
    """
    return [line.removesuffix("\r") for line in text.split("\n")]


def tokenize_header(header: str) -> list[Token]:
    """Split the header line into its type, scope, marker and description tokens."""
    header = header.strip()
    if not header:
        raise LexError("Empty header line")

    colon = header.find(":")
    if colon == -1:
        raise LexError("Missing ':' separator in header")

    before = header[:colon].strip()
    description = header[colon + 1 :].strip()
    if not description:
        raise LexError("Empty description")
    if not before:
        raise LexError("Empty commit type")

    breaking = before.endswith("!")
    if breaking:
        before = before[:-1].rstrip()

    scope: str | None = None
    open_paren = before.find("(")
    if open_paren == -1:
        commit_type = before
    else:
        close_paren = before.find(")", open_paren)
        if close_paren == -1:
            raise LexError("Unclosed scope parenthesis")
        if before[close_paren + 1 :].strip():
            raise LexError("Unexpected content after scope")
        commit_type = before[:open_paren].strip()
        scope = before[open_paren + 1 : close_paren].strip()

    if not commit_type:
        raise LexError("Empty commit type")

    tokens = [Token.type(commit_type)]
    if scope is not None:
        tokens.append(Token.scope(scope))
    if breaking:
        tokens.append(Token.breaking_marker())
    tokens.append(Token.description(description))
    return tokens


def find_footer_separator(line: str) -> tuple[int, str] | None:
    """Return ``(index, separator)`` of the earliest footer separator in *line*."""
    hits = [(line.find(sep), sep) for sep in FOOTER_SEPARATORS if sep in line]
    if not hits:
        return None
    return min(hits)


def is_footer_line(line: str) -> bool:
    """Heuristic: does *line* look like ``KEY: value`` metadata rather than prose?

    Examples:
        >>> is_footer_line("Refs: #42")
        True
        >>> is_footer_line("Closes #7")
        True
        >>> is_footer_line("Co-authored-by: Jane <jane@example.com>")
        True
        >>> is_footer_line("lowercase: value")
        False
        >>> is_footer_line("Note that the parser: changed")
        False
    """
    line = line.strip()
    if line.upper().startswith(_BREAKING_PREFIXES):
        return True

    found = find_footer_separator(line)
    if found is None:
        return False
    key = line[: found[0]].strip()
    return is_footer_key(key)


def is_footer_key(key: str) -> bool:
    """A single capitalized word, or an all-uppercase multi-word phrase."""
    if not key:
        return False
    if len(key.split()) == 1:
        return key[0].isupper()
    return all(c.isupper() or c in " -" for c in key)
