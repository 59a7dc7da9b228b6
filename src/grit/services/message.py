"""MessageService — check, format, and annotate commit message buffers.

Wraps the compile pipeline for the CLI. Raw buffers are comment-stripped
(per ``[input]`` config) before compiling; compile failures become
``ServiceResult(ok=False)`` carrying the stage and offending value.
"""

from __future__ import annotations

from typing import Any

import structlog

from grit.compiler.errors import CompileError
from grit.compiler.formatter import format_message
from grit.compiler.lexer import split_lines
from grit.compiler.pipeline import compile_message
from grit.config.models import InputConfig
from grit.domain.message import Message
from grit.domain.template import COMMIT_TEMPLATE, annotate_error, strip_comments
from grit.services.result import ServiceResult

log = structlog.get_logger(__name__)


class MessageService:
    """Service-layer facade over :mod:`grit.compiler.pipeline`."""

    def __init__(self, config: InputConfig | None = None) -> None:
        self._config = config or InputConfig()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def check(self, text: str) -> ServiceResult:
        """Validate *text*; on success report the canonical form and its parts."""
        op = "check"
        prepared = self._prepare(text)
        if not prepared:
            return self._empty(op)
        try:
            message = compile_message(prepared)
        except CompileError as exc:
            return self._rejected(op, exc)

        canonical = format_message(message)
        changed = canonical != prepared
        warnings: list[str] = []
        if changed:
            warnings.append("Message is valid but not in canonical form")
        log.debug("message.compiled", op=op, kind=str(message.kind), changed=changed)
        return ServiceResult.success(
            op,
            {**_summary(message), "message": canonical, "changed": changed},
            warnings=warnings,
            meta={
                "input_lines": len(split_lines(prepared)),
                "canonical_lines": len(split_lines(canonical)),
            },
        )

    def format(self, text: str) -> ServiceResult:
        """Return only the canonical rendering of *text*."""
        op = "format"
        prepared = self._prepare(text)
        if not prepared:
            return self._empty(op)
        try:
            message = compile_message(prepared)
        except CompileError as exc:
            return self._rejected(op, exc)
        log.debug("message.compiled", op=op, kind=str(message.kind))
        return ServiceResult.success(op, {"message": format_message(message)})

    def annotate(self, text: str) -> ServiceResult:
        """Return the buffer ready for re-editing.

        Valid input comes back canonical; invalid input comes back with a
        comment block explaining the error. Both are successful results.
        """
        op = "annotate"
        prepared = self._prepare(text)
        if not prepared:
            return self._empty(op)
        try:
            message = compile_message(prepared)
        except CompileError as exc:
            log.info("message.rejected", op=op, stage=str(exc.stage), code=exc.code)
            annotated = annotate_error(prepared, exc, self._config.comment_char)
            return ServiceResult.success(
                op, {"valid": False, "code": exc.code, "message": annotated}
            )
        return ServiceResult.success(op, {"valid": True, "message": format_message(message)})

    def template(self) -> ServiceResult:
        """Return the commentary template for a new message buffer."""
        text = COMMIT_TEMPLATE
        if self._config.comment_char != "#":
            text = "\n".join(
                self._config.comment_char + line[1:] for line in text.splitlines()
            )
        return ServiceResult.success("template", {"template": text})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _prepare(self, text: str) -> str:
        if self._config.strip_comments:
            return strip_comments(text, self._config.comment_char)
        return text.strip()

    def _empty(self, op: str) -> ServiceResult:
        return ServiceResult.failure(op, "EMPTY_MESSAGE", "Commit message is empty")

    def _rejected(self, op: str, exc: CompileError) -> ServiceResult:
        log.info("message.rejected", op=op, stage=str(exc.stage), code=exc.code)
        detail: dict[str, Any] = {"stage": str(exc.stage)}
        if exc.value is not None:
            detail["value"] = exc.value
        return ServiceResult.failure(op, exc.code, str(exc), detail)


def _summary(message: Message) -> dict[str, Any]:
    return {
        "kind": str(message.kind),
        "scope": message.scope,
        "description": message.description,
        "breaking": message.is_breaking,
        "footer_count": len(message.footers) + (1 if message.is_breaking else 0),
    }
