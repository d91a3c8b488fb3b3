"""Typed configuration schema and loader for the PDF service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PageSettings(BaseModel):
    """Paper size, orientation and margins (points, left/top/right/bottom)."""

    size: Literal["A4", "LETTER"]
    orientation: Literal["portrait", "landscape"]
    margins: tuple[float, float, float, float]

    model_config = ConfigDict(extra="forbid")


class MetadataSettings(BaseModel):
    """Fixed document information strings."""

    subject: str
    keywords: str
    creator: str
    producer: str

    model_config = ConfigDict(extra="forbid")


class FontFamily(BaseModel):
    """Engine font names for the four faces of a family."""

    normal: str
    bold: str
    italics: str
    bolditalics: str

    model_config = ConfigDict(extra="forbid")


class FontSettings(BaseModel):
    """Font families registered with the typesetting engine."""

    default_family: str
    families: dict[str, FontFamily]

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _default_is_registered(self) -> "FontSettings":
        if self.default_family not in self.families:
            raise ValueError(f"default_family '{self.default_family}' is not a configured family")
        return self


class RenderSettings(BaseModel):
    """Typesetting output options."""

    chunk_size: conint(ge=1)
    invariant: bool

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level for entry points configuring logging."""

    level: LogLevel
    level_env: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    page: PageSettings
    metadata: MetadataSettings
    fonts: FontSettings
    render: RenderSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``logging.level_env``.
    """

    with (
        importlib_resources.files("permitpdf.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    logging_section = merged.get("logging")
    level_env = logging_section.get("level_env") if isinstance(logging_section, dict) else None
    if level_env and environ.get(level_env):
        merged = deep_merge_dicts(merged, {"logging": {"level": environ[level_env].upper()}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "PageSettings",
    "MetadataSettings",
    "FontFamily",
    "FontSettings",
    "RenderSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
