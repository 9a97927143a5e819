"""Typed configuration schema and loader for the exporters."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint

from ..render.layout import PageGeometry

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------

PAGE_SIZES_MM: dict[str, tuple[float, float]] = {
    "a4": (210.0, 297.0),
    "letter": (215.9, 279.4),
    "legal": (215.9, 355.6),
}

GrayLevel = conint(ge=0, le=255)
Length = confloat(ge=0.0)


class PageSettings(BaseModel):
    """Portrait page size and margins."""

    size: Literal["a4", "letter", "legal"]
    margin: Length
    page_bottom: Length

    model_config = ConfigDict(extra="forbid")

    def geometry(self) -> PageGeometry:
        width, height = PAGE_SIZES_MM[self.size]
        return PageGeometry(
            width=width, height=height, margin=self.margin, page_bottom=self.page_bottom
        )


class FontSettings(BaseModel):
    """Font family and the sizes used for each document part."""

    family: Literal["helvetica", "times", "courier"]
    title_size: confloat(gt=0.0)
    byline_size: confloat(gt=0.0)
    summary_size: confloat(gt=0.0)
    body_size: confloat(gt=0.0)
    heading_size: confloat(gt=0.0)

    model_config = ConfigDict(extra="forbid")


class SpacingSettings(BaseModel):
    """Line heights and cursor advances."""

    title_line_height: Length
    title_gap: Length
    byline_advance: Length
    rule_advance: Length
    summary_line_height: Length
    summary_gap: Length
    body_line_height: Length
    block_gap: Length
    separator_advance: Length
    separator_half_width: Length

    model_config = ConfigDict(extra="forbid")


class ColorSettings(BaseModel):
    text: GrayLevel
    byline: GrayLevel
    rule: GrayLevel
    separator: GrayLevel

    model_config = ConfigDict(extra="forbid")


class TextSettings(BaseModel):
    bullet: str

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Where artifacts go and what to call them when the title has no slug."""

    directory: str
    default_stem: str
    env: str

    model_config = ConfigDict(extra="forbid")


class MetadataSettings(BaseModel):
    creator: str

    model_config = ConfigDict(extra="forbid")


class ExportConfig(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    page: PageSettings
    fonts: FontSettings
    spacing: SpacingSettings
    colors: ColorSettings
    text: TextSettings
    output: OutputSettings
    metadata: MetadataSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``overrides`` laid over it section by section.

    Nested sections merge key by key; any other value, lists included,
    replaces the base value.  Neither input is modified.
    """

    merged: dict[str, Any] = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge_dicts(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ExportConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``output.env`` for the output directory.
    """

    with (
        importlib_resources.files("storyexport.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"configuration file {path} must contain a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ExportConfig.model_validate(merged)

    environ = env if env is not None else os.environ
    out_env = cfg.output.env
    if environ.get(out_env):
        cfg.output.directory = environ[out_env]

    return cfg


__all__ = [
    "PAGE_SIZES_MM",
    "ExportConfig",
    "PageSettings",
    "FontSettings",
    "SpacingSettings",
    "ColorSettings",
    "TextSettings",
    "OutputSettings",
    "MetadataSettings",
    "deep_merge_dicts",
    "load_config",
]
