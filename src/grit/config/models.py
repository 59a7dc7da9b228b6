"""Config sections for grit.

Every field has a code default; a config file only lists what it
overrides. The same models back ``grit.toml``, ``[tool.grit]`` in
pyproject.toml and the ``GRIT_*`` environment variables.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class InputConfig(BaseModel):
    """``[input]`` — how an editor buffer is cleaned before compiling."""

    model_config = {"frozen": True}

    strip_comments: bool = True
    comment_char: str = "#"

    @field_validator("comment_char")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1 or value.isspace():
            msg = "comment_char must be a single non-whitespace character"
            raise ValueError(msg)
        return value


class OutputConfig(BaseModel):
    """``[output]`` — rich rendering of check results."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
    color: bool = True
