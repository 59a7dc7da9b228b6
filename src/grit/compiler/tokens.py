"""Token vocabulary shared by the lexer and parser.

A Token is a tagged value: an explicit :class:`TokenKind` plus an optional
string payload. Tokens describe structure only. ``Token.type("anything")``
is legal; whether a type is known is decided by the domain layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

_PREVIEW_CHARS = 30


class TokenKind(StrEnum):
    """Discriminator for :class:`Token`."""

    TYPE = "Type"
    SCOPE = "Scope"
    BREAKING_MARKER = "BreakingMarker"
    DESCRIPTION = "Description"
    BODY = "Body"
    FOOTER = "Footer"
    LINE_BREAK = "LineBreak"
    END_OF_INPUT = "EndOfInput"


# Kinds that carry a string payload.
PAYLOAD_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.TYPE,
        TokenKind.SCOPE,
        TokenKind.DESCRIPTION,
        TokenKind.BODY,
        TokenKind.FOOTER,
    }
)


@dataclass(frozen=True)
class Token:
    """One lexical unit of a commit message."""

    kind: TokenKind
    value: str | None = None

    def __post_init__(self) -> None:
        carries = self.kind in PAYLOAD_KINDS
        if carries and self.value is None:
            msg = f"{self.kind} token requires a string payload"
            raise ValueError(msg)
        if not carries and self.value is not None:
            msg = f"{self.kind} token does not carry a payload"
            raise ValueError(msg)

    # --- constructors ---

    @classmethod
    def type(cls, raw: str) -> Token:
        return cls(TokenKind.TYPE, raw)

    @classmethod
    def scope(cls, raw: str) -> Token:
        return cls(TokenKind.SCOPE, raw)

    @classmethod
    def breaking_marker(cls) -> Token:
        return cls(TokenKind.BREAKING_MARKER)

    @classmethod
    def description(cls, text: str) -> Token:
        return cls(TokenKind.DESCRIPTION, text)

    @classmethod
    def body(cls, text: str) -> Token:
        return cls(TokenKind.BODY, text)

    @classmethod
    def footer(cls, line: str) -> Token:
        return cls(TokenKind.FOOTER, line)

    @classmethod
    def line_break(cls) -> Token:
        return cls(TokenKind.LINE_BREAK)

    @classmethod
    def end_of_input(cls) -> Token:
        return cls(TokenKind.END_OF_INPUT)

    def __str__(self) -> str:
        """Short display form, e.g. ``Type(feat)`` or ``LineBreak``.

        Descriptions and bodies are truncated so error messages stay on
        one line.
        """
        if self.value is None:
            return str(self.kind)
        text = self.value
        if self.kind in (TokenKind.DESCRIPTION, TokenKind.BODY) and len(text) > _PREVIEW_CHARS:
            text = text[:_PREVIEW_CHARS] + "..."
        return f"{self.kind}({text})"
