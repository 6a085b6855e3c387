"""Typed configuration schema and loader for the boldextract package."""

from __future__ import annotations

import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, constr

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class DocumentSettings(BaseModel):
    """Which files are accepted and which archive entry holds the body."""

    extension: constr(min_length=1)
    entry: constr(min_length=1)

    model_config = ConfigDict(extra="forbid")


class ExtractionSettings(BaseModel):
    """Bold run matching strategy."""

    strategy: Literal["pattern", "structural"]

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Result formatting.

    ``scheme`` is free-form: unknown schemes pass the fragment list through.
    """

    scheme: str
    separator: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    document: DocumentSettings
    extraction: ExtractionSettings
    output: OutputSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def merge_settings(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Overlay user ``overrides`` onto ``defaults`` section by section.

    Sections present on both sides (``document``, ``output``, ...) are merged
    key by key so a partial section keeps its remaining defaults.  Anything
    else in ``overrides`` replaces the default outright.  Neither input is
    modified.
    """

    merged: dict[str, Any] = dict(defaults)
    for section, value in overrides.items():
        base = merged.get(section)
        if isinstance(base, dict) and isinstance(value, dict):
            value = merge_settings(base, value)
        merged[section] = value
    return merged


def load_config(path: str | os.PathLike[str] | None = None) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML.
    """

    with (
        importlib_resources.files("boldextract.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        merged = merge_settings(defaults, overrides)
    else:
        merged = defaults

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "DocumentSettings",
    "ExtractionSettings",
    "OutputSettings",
    "merge_settings",
    "load_config",
]
