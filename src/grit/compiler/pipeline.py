"""The compile pipeline: Lexer -> Parser -> Message.from_ast -> Formatter.

Public entry points:

- :func:`compile` — raw text to canonical text.
- :func:`compile_message` — raw text to the validated :class:`Message`.
- :func:`validate` — raw text to None, raising on the first problem.

Every failure surfaces as :class:`CompileError`, lifted from the stage
error that caused it. No stage recovers from another's error.
"""

from __future__ import annotations

import logging

from grit.compiler.errors import CompileError, LexError, ParseError
from grit.compiler.formatter import format_message
from grit.compiler.lexer import tokenize
from grit.compiler.nodes import CommitAst
from grit.compiler.parser import parse
from grit.domain.errors import DomainError
from grit.domain.message import Message

logger = logging.getLogger(__name__)


def compile_ast(text: str) -> CommitAst:
    """Run the lexer and parser only."""
    try:
        tokens = tokenize(text)
    except LexError as exc:
        raise CompileError.from_lex(exc) from exc
    try:
        return parse(tokens)
    except ParseError as exc:
        raise CompileError.from_parse(exc) from exc


def compile_message(text: str) -> Message:
    """Compile *text* into a validated Message.

    Raises:
        CompileError: Wrapping the LexError, ParseError or DomainError
            of the first stage that rejected the input.
    """
    ast = compile_ast(text)
    try:
        message = Message.from_ast(ast)
    except DomainError as exc:
        raise CompileError.from_domain(exc) from exc
    logger.debug("Compiled %s message (breaking=%s)", message.kind, message.is_breaking)
    return message


def compile(text: str) -> str:  # noqa: A001
    """Compile *text* into its canonical rendering.

    ``compile(compile(x)) == compile(x)`` for every valid *x*.

    Raises:
        CompileError: See :func:`compile_message`.
    """
    return format_message(compile_message(text))


def validate(text: str) -> None:
    """Raise :class:`CompileError` if *text* is not a valid commit message."""
    compile_message(text)
