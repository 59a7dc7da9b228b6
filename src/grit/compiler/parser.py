"""Parser — token sequence to :class:`~grit.compiler.nodes.CommitAst`.

Grammar (one token of lookahead, no backtracking)::

    commit  := header LINE_BREAK* body? LINE_BREAK* footer* END_OF_INPUT
    header  := TYPE SCOPE? BREAKING_MARKER? DESCRIPTION
    body    := BODY
    footer  := FOOTER LINE_BREAK*

The type string is passed through untouched; resolving it to a known
kind is the domain layer's job.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from grit.compiler.errors import ParseError
from grit.compiler.lexer import find_footer_separator
from grit.compiler.nodes import BodyNode, CommitAst, FooterNode, HeaderNode
from grit.compiler.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_END = Token.end_of_input()


def parse(tokens: Sequence[Token]) -> CommitAst:
    """Parse *tokens* into a CommitAst.

    Raises:
        ParseError: On an unexpected token or an unsplittable footer line.
    """
    return Parser(tokens).parse()


def split_footer(raw: str) -> tuple[str, str]:
    """Split a footer line at its first ``": "`` or ``" #"``.

    The ``#`` of an issue reference stays on the value, so
    ``"Closes #12"`` becomes ``("Closes", "#12")``.

    Raises:
        ParseError: If no separator is present or either side is empty.
    """
    found = find_footer_separator(raw)
    if found is None:
        raise ParseError.invalid_footer(raw)
    idx, sep = found
    key = raw[:idx].strip()
    value = raw[idx + len(sep) :] if sep == ": " else raw[idx + 1 :]
    value = value.strip()
    if not key or not value:
        raise ParseError.invalid_footer(raw)
    return key, value


class Parser:
    """Single-use cursor over an immutable token tuple."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tuple(tokens)
        self._pos = 0

    def parse(self) -> CommitAst:
        header = self._parse_header()
        self._skip_line_breaks()
        body = self._parse_body()
        self._skip_line_breaks()
        footers = self._parse_footers()
        self._expect(TokenKind.END_OF_INPUT, "Footer or EndOfInput")
        logger.debug("Parsed commit AST with %d footers", len(footers))
        return CommitAst(header=header, body=body, footers=footers)

    # --- productions ---

    def _parse_header(self) -> HeaderNode:
        type_raw = self._expect(TokenKind.TYPE, "Type")
        scope = self._accept(TokenKind.SCOPE)
        breaking = self._peek().kind is TokenKind.BREAKING_MARKER
        if breaking:
            self._advance()
        description = self._expect(TokenKind.DESCRIPTION, "Description")
        return HeaderNode(
            type_raw=type_raw,
            scope=scope,
            breaking_marker_present=breaking,
            description=description,
        )

    def _parse_body(self) -> BodyNode | None:
        content = self._accept(TokenKind.BODY)
        return BodyNode(content=content) if content is not None else None

    def _parse_footers(self) -> tuple[FooterNode, ...]:
        footers: list[FooterNode] = []
        while (raw := self._accept(TokenKind.FOOTER)) is not None:
            key, value = split_footer(raw)
            footers.append(FooterNode(key=key, value=value))
            self._skip_line_breaks()
        return tuple(footers)

    # --- cursor primitives ---

    def _peek(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return _END

    def _advance(self) -> Token:
        token = self._peek()
        if self._pos < len(self._tokens):
            self._pos += 1
        return token

    def _accept(self, kind: TokenKind) -> str | None:
        """Consume and return the payload of the next token if it is *kind*."""
        if self._peek().kind is not kind:
            return None
        return self._advance().value or ""

    def _expect(self, kind: TokenKind, expected: str) -> str:
        token = self._peek()
        if token.kind is not kind:
            raise ParseError.unexpected_token(expected, token)
        self._advance()
        return token.value or ""

    def _skip_line_breaks(self) -> None:
        while self._peek().kind is TokenKind.LINE_BREAK:
            self._advance()
