"""Locate and read grit configuration.

Two file shapes are understood:

- ``grit.toml`` with top-level ``[input]`` / ``[output]`` tables.
- ``pyproject.toml`` with the same tables nested under ``[tool.grit]``.
  A pyproject without that table is not a config file.

Lookup order: the ``GRIT_CONFIG`` env var, then a walk up from the
starting directory. The walk stops at the repository root (the first
directory holding ``.git``), so a checkout never picks up settings from
a parent project.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "grit.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "GRIT_CONFIG"
REPO_MARKER = ".git"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    In each directory ``grit.toml`` wins over a ``pyproject.toml`` that
    carries a ``[tool.grit]`` table. A ``GRIT_CONFIG`` path that is not a
    file disables discovery entirely.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for directory in _walk_up((start or Path.cwd()).resolve()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* and return the raw grit tables.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return dict(data.get("tool", {}).get("grit", {}))
    return data



def _walk_up(start: Path) -> list[Path]:
    dirs = [start]
    for parent in start.parents:
        if (dirs[-1] / REPO_MARKER).exists():
            break
        dirs.append(parent)
    return dirs


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return "grit" in data.get("tool", {})
