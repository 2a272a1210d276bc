# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Settings for the command-line adapter.

Sources, highest precedence first:

1. Explicit values (command-line flags)
2. TOML config file (``--config``)
3. Environment variables prefixed ``HUEBLEND_``
4. Field defaults

The blending core takes plain arguments and never reads settings.
"""

from __future__ import annotations

import logging
import pathlib as pl
import typing as ty

import pydantic as pc
import pydantic_settings as ps

from hueblend.runtime.serializers import OutputFormat
from hueblend.schema import Color

HexColor: ty.TypeAlias = ty.Annotated[
    str, pc.Field(description="Color in #rrggbb hex format")
]


class BlendSettings(ps.BaseSettings):
    """Defaults and overrides for one blend run."""

    model_config = ps.SettingsConfigDict(
        env_prefix="HUEBLEND_",
        extra="ignore",
        validate_default=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        config_file = getattr(cls, "_config_file", None)

        sources = [init_settings]
        if config_file is not None:
            sources.append(
                ps.TomlConfigSettingsSource(settings_cls, toml_file=config_file)
            )
        sources.extend([env_settings, file_secret_settings])
        return tuple(sources)

    start: HexColor = "#000000"
    end: HexColor = "#ffffff"
    midpoints: int = pc.Field(default=10, ge=0, description="Number of midpoints")
    unique: bool = pc.Field(
        default=False, description="Collapse adjacent duplicate colors"
    )
    format: OutputFormat = OutputFormat.LINES
    output: pl.Path = pc.Field(
        default=pl.Path("output.txt"), description="Output file path"
    )
    write: bool = pc.Field(
        default=False, description="Write the blended colors to the output file"
    )
    workers: ty.Optional[int] = pc.Field(
        default=None, ge=1, description="Thread pool size for step evaluation"
    )
    log_level: str = "WARNING"

    @pc.field_validator("start", "end")
    @classmethod
    def validate_hex(cls, value: str) -> str:
        # ColorError is a ValueError, so pydantic reports it as a validation error
        return Color.from_hex(value).to_hex()

    @pc.field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def start_color(self) -> Color:
        return Color.from_hex(self.start)

    @property
    def end_color(self) -> Color:
        return Color.from_hex(self.end)

    @classmethod
    def load(
        cls, config_file: ty.Optional[pl.Path] = None, **overrides: ty.Any
    ) -> "BlendSettings":
        """Build settings from all sources.

        Args:
            config_file: Optional TOML file. A missing file is an error.
            **overrides: Explicit values; ``None`` entries are ignored.

        Raises:
            FileNotFoundError: If config_file does not exist.
            pydantic.ValidationError: If any value is invalid.
        """
        explicit = {k: v for k, v in overrides.items() if v is not None}
        if config_file is None:
            return cls(**explicit)

        config_file = pl.Path(config_file)
        if not config_file.is_file():
            raise FileNotFoundError(f"config file not found: {config_file}")

        cls._config_file = config_file
        try:
            return cls(**explicit)
        finally:
            del cls._config_file
