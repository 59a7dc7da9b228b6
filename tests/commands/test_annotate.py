"""Tests for the annotate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from grit.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestAnnotateCommand:
    def test_valid_message_is_canonicalized(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["annotate", "DOCS: x"])
        assert result.exit_code == 0
        assert result.stdout == "docs: x\n"

    def test_invalid_message_gets_comment_block(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["annotate", "feat add login"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "# grit: message rejected (lex stage, LEX_ERROR)"
        assert lines[1] == "#   Missing ':' separator in header"
        assert lines[-1] == "feat add login"

    def test_rewrites_editor_buffer(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        buffer = tmp_path / "COMMIT_EDITMSG"
        buffer.write_text("wip: stuff\n\n# Please enter the commit message\n")
        first = cli_runner.invoke(cli, ["annotate", "-f", str(buffer)])
        assert first.exit_code == 0
        buffer.write_text(first.stdout)

        second = cli_runner.invoke(cli, ["annotate", "-f", str(buffer)])
        assert second.stdout == first.stdout
        assert second.stdout.count("# grit: message rejected") == 1
        assert "INVALID_COMMIT_TYPE" in second.stdout

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "annotate", "feat(a b): x"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["valid"] is False
        assert data["code"] == "INVALID_SCOPE"

    def test_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["annotate", "-f", "-"], input="# nothing\n")
        assert result.exit_code == 1
        assert "EMPTY_MESSAGE" in result.stderr

    def test_comment_char_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "grit.toml").write_text('[input]\ncomment_char = ";"\n')
        result = cli_runner.invoke(cli, ["annotate", "; note\nwip: x"])
        assert result.exit_code == 0
        assert result.stdout.startswith("; grit: message rejected")
        assert "note" not in result.stdout
