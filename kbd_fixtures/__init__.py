"""
kbd-fixtures: expected keyboard layout fixtures for input-method tests.

Public API surface:

- ``get_layout(name, locale=None)`` -- **recommended entry point**. Builds
  a registered layout (e.g. ``"swiss"``) with the customizer for *locale*
  and returns a ``Layout`` whose tables a test harness compares against
  the real keyboard.

- ``export_layout(layout, output_dir, ...)`` -- Writes a layout's alphabet
  and symbol tables as CSV or Parquet files.

- ``run(config_path)`` -- Config-driven workflow. Loads and validates
  ``fixtures.yaml``, builds the layout, and exports it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kbd_fixtures.config import load_config, validate_config
from kbd_fixtures.customizer import LayoutCustomizer, get_customizer
from kbd_fixtures.export import export_layout
from kbd_fixtures.layout import Layout
from kbd_fixtures.layout_registry import available_layouts
from kbd_fixtures.layout_registry import get_layout as _build_layout

__all__ = [
    "get_layout",
    "export_layout",
    "run",
    "available_layouts",
    "Layout",
    "LayoutCustomizer",
]

logger = logging.getLogger(__name__)


def get_layout(name: str, locale: str | None = None) -> Layout:
    """Build a registered layout with the customizer for *locale*.

    Args:
        name: Registered layout name, e.g. ``"swiss"``.
        locale: Customizer locale, e.g. ``"de_CH"``. ``None`` uses the
            neutral customizer, which leaves layout placeholders unresolved.

    Raises:
        UnknownLayoutError: If *name* is not registered.
        UnknownCustomizerError: If *locale* has no customizer.

    Examples::

        layout = kbd_fixtures.get_layout("swiss", locale="de_CH")
        rows = layout.get_alphabet_layout(is_phone=True)
        assert rows[0][10].label == "ü"
    """
    customizer = get_customizer(locale)
    return _build_layout(name, customizer)


def run(config_path: str | Path = "fixtures.yaml") -> list[str]:
    """Config-driven entry point: load config, build layout, export tables.

    Orchestration:
      1. ``load_config()`` -> ``FixtureConfig`` (Pydantic validation on load).
      2. ``validate_config()`` -- cross-check layout and locale.
      3. ``get_layout()`` -- build the layout with its customizer.
      4. ``export_layout()`` -- write the tables.

    Returns:
        List of file paths written.

    Raises:
        FileNotFoundError: If *config_path* does not exist.
        pydantic.ValidationError: If config fails Pydantic validation.
        ConfigValidationError: If the layout or locale is unknown.
        ExportError: If writing the outputs fails.
    """
    logger.info("run() -- config_path=%s", config_path)

    config = load_config(config_path)
    validate_config(config)

    layout = get_layout(config.layout.name, config.layout.locale)
    written = export_layout(
        layout,
        output_dir=config.output.output_dir,
        output_format=config.output.output_format,
        is_phone=config.layout.is_phone,
        resolve=config.output.resolve_placeholders,
    )
    logger.info("run() -- wrote %d file(s) to %s", len(written), config.output.output_dir)
    return written
