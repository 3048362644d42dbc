"""
Configuration models and YAML I/O for kbd-fixtures.

This module defines the Pydantic models that map 1:1 to fixtures.yaml,
plus helper functions for loading, saving, and generating the config.

Key models:
- FixtureConfig: Top-level config (layout selection + output).
- LayoutSelection: Which layout, which locale customizer, which form factor.
- OutputConfig: Output directory, format, and placeholder resolution toggle.

Key functions:
- load_config(path) -> FixtureConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(...) -> FixtureConfig: Build a config for a layout.
- validate_config(config): Cross-check layout and locale against registries.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from kbd_fixtures.customizer import load_all_customizers
from kbd_fixtures.exceptions import ConfigValidationError
from kbd_fixtures.layout_registry import available_layouts

logger = logging.getLogger(__name__)


class LayoutSelection(BaseModel):
    """The layout variant to produce fixtures for."""

    name: str = Field(..., min_length=1, description="Registered layout name, e.g. 'swiss'")
    locale: str | None = Field(
        None, description="Customizer locale (e.g. 'de_CH'); None for no customizer"
    )
    form_factor: Literal["phone", "tablet"] = Field(
        "phone", description="Selects the phone or tablet alphabet table"
    )

    @property
    def is_phone(self) -> bool:
        return self.form_factor == "phone"


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "csv", description="Output format"
    )
    resolve_placeholders: bool = Field(
        True, description="If True, export tables with placeholders resolved by the customizer"
    )


class FixtureConfig(BaseModel):
    """Top-level configuration for kbd-fixtures.

    Maps 1:1 to fixtures.yaml.
    """

    layout: LayoutSelection
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> FixtureConfig:
    """Load and validate fixtures.yaml into a FixtureConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the config file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return FixtureConfig.model_validate(raw)


def save_config(config: FixtureConfig, path: str | Path) -> None:
    """Serialize a FixtureConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# kbd-fixtures configuration\n")
        f.write("# Edit this file to change the layout, locale, or output format.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(
    layout_name: str,
    locale: str | None = None,
    output_dir: str = "outputs/",
) -> FixtureConfig:
    """Build a FixtureConfig for one layout with default output settings."""
    return FixtureConfig(
        layout=LayoutSelection(name=layout_name, locale=locale),
        output=OutputConfig(output_dir=output_dir),
    )


def validate_config(config: FixtureConfig) -> None:
    """Cross-validate that the configured layout and locale exist.

    Raises:
        ConfigValidationError: If the layout is not registered or the
            locale has no customizer.
    """
    layouts = available_layouts()
    if config.layout.name not in layouts:
        raise ConfigValidationError(
            f"Layout '{config.layout.name}' in fixtures.yaml is not registered.\n"
            f"Available layouts: {layouts}"
        )
    if config.layout.locale is not None:
        locales = sorted(load_all_customizers())
        if config.layout.locale not in locales:
            raise ConfigValidationError(
                f"Locale '{config.layout.locale}' in fixtures.yaml has no customizer.\n"
                f"Available locales: {locales}"
            )
    logger.info(
        "Config validation passed: layout=%s, locale=%s",
        config.layout.name, config.layout.locale,
    )
