"""Stage errors for the compile pipeline.

Three disjoint error types, one per stage:

- :class:`LexError` — the header is structurally malformed.
- :class:`ParseError` — the token stream does not match the grammar, or
  a footer line cannot be split into key and value.
- :class:`~grit.domain.errors.DomainError` — well formed, semantically
  invalid (lives in the domain layer).

:class:`CompileError` is the boundary type callers of ``compile`` see. It
is only built through the explicit ``from_*`` lifts and keeps the stage
error as ``cause`` so each failure mode stays testable on its own.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from grit.domain.errors import DomainError

if TYPE_CHECKING:
    from grit.compiler.tokens import Token


class LexError(Exception):
    """Structural failure found while tokenizing."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

    def __repr__(self) -> str:
        return f"LexError({self.reason!r})"


class ParseErrorKind(StrEnum):
    UNEXPECTED_TOKEN = "UNEXPECTED_TOKEN"
    INVALID_FOOTER = "INVALID_FOOTER"


class ParseError(Exception):
    """Token stream does not match the expected commit grammar."""

    def __init__(
        self,
        kind: ParseErrorKind,
        *,
        expected: str | None = None,
        found: Token | None = None,
        line: str | None = None,
    ) -> None:
        self.kind = kind
        self.expected = expected
        self.found = found
        self.line = line
        super().__init__(self._describe())

    @classmethod
    def unexpected_token(cls, expected: str, found: Token) -> ParseError:
        return cls(ParseErrorKind.UNEXPECTED_TOKEN, expected=expected, found=found)

    @classmethod
    def invalid_footer(cls, line: str) -> ParseError:
        return cls(ParseErrorKind.INVALID_FOOTER, line=line)

    def _describe(self) -> str:
        if self.kind is ParseErrorKind.UNEXPECTED_TOKEN:
            return f"Expected {self.expected}, found {self.found}"
        return f"Invalid footer line '{self.line}'. Expected format 'KEY: value'"

    def __repr__(self) -> str:
        if self.kind is ParseErrorKind.UNEXPECTED_TOKEN:
            return f"ParseError({self.kind}, expected={self.expected!r}, found={self.found!r})"
        return f"ParseError({self.kind}, line={self.line!r})"


class CompileStage(StrEnum):
    """Pipeline stage that rejected the input."""

    LEX = "lex"
    PARSE = "parse"
    DOMAIN = "domain"


class CompileError(Exception):
    """Boundary error for the whole pipeline.

    Attributes:
        stage: Which stage failed.
        cause: The original :class:`LexError`, :class:`ParseError`, or
            :class:`DomainError`, untouched.
    """

    def __init__(self, stage: CompileStage, cause: LexError | ParseError | DomainError) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(str(cause))

    @classmethod
    def from_lex(cls, error: LexError) -> CompileError:
        return cls(CompileStage.LEX, error)

    @classmethod
    def from_parse(cls, error: ParseError) -> CompileError:
        return cls(CompileStage.PARSE, error)

    @classmethod
    def from_domain(cls, error: DomainError) -> CompileError:
        return cls(CompileStage.DOMAIN, error)

    @property
    def code(self) -> str:
        """Stable machine-readable code, e.g. ``LEX_ERROR`` or ``INVALID_SCOPE``."""
        match self.cause:
            case LexError():
                return "LEX_ERROR"
            case ParseError(kind=kind) | DomainError(kind=kind):
                return str(kind)
        return "COMPILE_ERROR"

    @property
    def value(self) -> str | int | None:
        """The offending input carried by the stage error, if any."""
        match self.cause:
            case LexError(reason=reason):
                return reason
            case ParseError(line=line) if line is not None:
                return line
            case ParseError(found=found) if found is not None:
                return str(found)
            case DomainError(value=value):
                return value
        return None

    def __repr__(self) -> str:
        return f"CompileError({self.stage}, {self.cause!r})"
