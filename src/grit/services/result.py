"""ServiceResult and ServiceError — what every MessageService operation returns.

INVARIANT: service methods never raise for rejected input; a compile
failure is an ``ok=False`` result whose error code is the stable
``CompileError.code`` (or ``EMPTY_MESSAGE``). The CLI renders these and
maps ``ok`` to the process exit status.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``detail`` carries the failing stage and, when there is one, the
    offending value (a footer line, a scope, a description length).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the message was accepted.
        op: Operation name: ``check``, ``format``, ``annotate`` or ``template``.
        data: Operation payload on success.
        warnings: Non-fatal notes, e.g. input that was valid but not canonical.
        error: Set exactly when ``ok`` is False.
        meta: Optional extra context, shown with ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any],
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [], meta=meta)

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error)

    @property
    def exit_code(self) -> int:
        """Process exit status for this result: 0 when ok, else 1."""
        return 0 if self.ok else 1
