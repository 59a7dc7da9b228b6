"""GritSettings — CLI flags, environment and config file merged into one object.

Sources, highest priority first:

1. keyword arguments (the root CLI group passes its flags here)
2. ``GRIT_*`` environment variables, ``__`` for nesting
   (``GRIT_OUTPUT__WIDTH=80``)
3. the config file from :func:`grit.config.discovery.find_config`
4. defaults on the section models

The config file is read by :class:`ConfigFileSource`, a pydantic-settings
source that accepts both ``grit.toml`` and ``pyproject.toml``.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from grit.config.discovery import find_config, read_config_file
from grit.config.models import InputConfig, OutputConfig


class ConfigFileSource(PydanticBaseSettingsSource):
    """Settings source backed by a discovered grit config file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if path is None or not path.is_file():
            return
        try:
            self._data = read_config_file(path)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources inside a classmethod, so the path chosen
# by from_cli reaches it through this slot.
_pending = threading.local()


class GritSettings(BaseSettings):
    """Resolved settings for one CLI invocation. Frozen.

    Attributes:
        config_path: The config file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GRIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_color: bool = False

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        path = getattr(_pending, "config_path", None)
        return init_settings, env_settings, ConfigFileSource(settings_cls, path)

    @property
    def use_color(self) -> bool:
        return self.output.color and not self.no_color

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: Any,
    ) -> GritSettings:
        """Build settings for the CLI.

        An explicit *config_path* that does not name a file means "no
        config file", not "fall back to discovery".
        """
        if config_path:
            explicit = Path(config_path)
            path = explicit if explicit.is_file() else None
        else:
            path = find_config(start)

        _pending.config_path = path
        try:
            return cls(config_path=path, **flags)
        finally:
            _pending.config_path = None
