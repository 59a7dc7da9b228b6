"""Tests for operation-specific Rich renderers."""

from grit.output.renderers import raw_text, render_quiet, render_result
from grit.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = _err("check", "INVALID_SCOPE", "Invalid scope 'a b'", stage="domain")
        output = render_result(result)
        assert "ERROR" in output
        assert "check" in output
        assert "Invalid scope 'a b'" in output
        assert "INVALID_SCOPE" in output
        assert "detail" not in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("check", "DESCRIPTION_TOO_LONG", "Too long", stage="domain", value=73)
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "stage: domain" in output
        assert "value: 73" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="check"))
        assert "Unknown error" in output


# ── Check renderer ────────────────────────────────────────────────────


def _check(**overrides: object) -> ServiceResult:
    data: dict[str, object] = {
        "kind": "feat",
        "scope": None,
        "description": "add login",
        "breaking": False,
        "footer_count": 0,
        "message": "feat: add login",
        "changed": False,
    }
    data.update(overrides)
    return _ok("check", **data)


class TestCheckRenderer:
    def test_plain(self) -> None:
        output = render_result(_check())
        assert "OK" in output
        assert "kind: feat" in output
        assert "footers: 0" in output
        assert "feat: add login" in output
        assert "commit message" in output
        assert "scope" not in output
        assert "breaking" not in output
        assert "canonical" not in output

    def test_scope_and_breaking(self) -> None:
        output = render_result(
            _check(
                scope="auth",
                breaking=True,
                footer_count=1,
                message="feat(auth)!: x\n\nBREAKING CHANGE: y",
            )
        )
        assert "scope: auth" in output
        assert "breaking: yes" in output
        assert "footers: 1" in output
        assert "BREAKING CHANGE: y" in output

    def test_rewritten_message(self) -> None:
        output = render_result(_check(changed=True))
        assert "canonical: rewritten" in output

    def test_verbose_shows_meta(self) -> None:
        result = ServiceResult.success(
            "check", {"kind": "fix"}, meta={"input_lines": 3, "canonical_lines": 1}
        )
        output = render_result(result, verbose=True)
        assert "meta" in output
        assert "input_lines: 3" in output
        assert "canonical_lines: 1" in output
        assert "meta" not in render_result(result)


# ── Raw text ops ──────────────────────────────────────────────────────


class TestRawTextOps:
    def test_format_is_verbatim(self) -> None:
        text = "feat: x\n\nBREAKING CHANGE: y"
        assert render_result(_ok("format", message=text)) == text

    def test_annotate_is_verbatim(self) -> None:
        text = "# grit: message rejected\n\nwip: x\n"
        assert render_result(_ok("annotate", valid=False, message=text)) == text.rstrip("\n")

    def test_template_is_verbatim(self) -> None:
        assert render_result(_ok("template", template="# a\n# b\n")) == "# a\n# b"

    def test_long_lines_are_not_wrapped(self) -> None:
        text = "fix: x\n\n" + "y" * 150
        assert render_result(_ok("format", message=text), width=40) == text

    def test_raw_text_helper(self) -> None:
        assert raw_text(_ok("format", message="fix: x\n")) == "fix: x"
        assert raw_text(_ok("check", message="fix: x")) is None
        assert raw_text(_err("format", "LEX_ERROR", "bad")) is None

    def test_failure_is_not_verbatim(self) -> None:
        output = render_result(_err("format", "LEX_ERROR", "Empty description"))
        assert output.startswith("ERROR")


# ── Quiet mode ────────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_success(self) -> None:
        assert render_quiet(_check()) == "OK: check"

    def test_error(self) -> None:
        result = _err("check", "LEX_ERROR", "Empty description")
        assert render_quiet(result) == "ERROR: check — Empty description"

    def test_raw_text_op(self) -> None:
        assert render_quiet(_ok("annotate", message="docs: x")) == "docs: x"

    def test_error_without_object(self) -> None:
        assert render_quiet(ServiceResult(ok=False, op="format")) == "ERROR: format — Unknown error"
