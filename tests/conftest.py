"""Shared pytest fixtures for grit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config discovery leaking in.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GRIT_CONFIG", raising=False)


@pytest.fixture
def full_message() -> str:
    """A message exercising every section: scope, marker, body, footers."""
    return """\
feat(auth)!: migrate to OAuth

Sessions are now backed by OAuth 2.0 tokens.

BREAKING CHANGE: existing sessions are invalidated
Refs: #42"""


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Drop handlers installed by CLI runs so they don't outlive the runner's streams."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    grit_level = logging.getLogger("grit").level
    yield
    root.handlers = handlers
    logging.getLogger("grit").setLevel(grit_level)
