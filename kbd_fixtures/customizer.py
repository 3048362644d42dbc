"""
Locale customizers for kbd-fixtures.

A layout fixture declares structure; some of its positions are placeholder
slots (``ROW1_11``, ``CURRENCY``, ...) whose glyph depends on the locale.
A ``LayoutCustomizer`` supplies those glyphs. Customizers are loaded from
YAML files in kbd_fixtures/customizers/, one file per locale::

    locale: de_CH
    description: Swiss German
    placeholders:
      ROW1_11:
        label: ü
        more_keys: [è]

Why YAML instead of hardcoded:
- A new locale for an existing layout is a new YAML file, no code changes.
- The layout fixture modules stay locale-neutral.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from kbd_fixtures.exceptions import UnknownCustomizerError
from kbd_fixtures.expected.key import ExpectedKey, ExpectedKeyboard, key

logger = logging.getLogger(__name__)

# Directory containing customizer YAML files (sibling package)
_CUSTOMIZERS_DIR = Path(__file__).parent / "customizers"

CURRENCY = "CURRENCY"
OTHER_CURRENCY_1 = "OTHER_CURRENCY_1"
OTHER_CURRENCY_2 = "OTHER_CURRENCY_2"
OTHER_CURRENCY_3 = "OTHER_CURRENCY_3"
OTHER_CURRENCY_4 = "OTHER_CURRENCY_4"

_OTHER_CURRENCY_SLOTS = (
    OTHER_CURRENCY_1,
    OTHER_CURRENCY_2,
    OTHER_CURRENCY_3,
    OTHER_CURRENCY_4,
)


class LayoutCustomizer(BaseModel):
    """Locale-specific values for a layout's placeholder slots.

    The default instance (no locale) resolves only the currency slots and
    leaves every other placeholder untouched.

    ``placeholders`` is stored as a tuple of ``(name, key)`` pairs so a
    customizer, and every Layout holding one, stays immutable and hashable.
    A mapping (as read from YAML) is accepted on input; ``placeholder_map``
    gives a read-only view for lookups.
    """

    model_config = ConfigDict(frozen=True)

    locale: str | None = None
    description: str = ""
    currency: str = "$"
    other_currencies: tuple[str, str, str, str] = ("€", "£", "¥", "₱")
    placeholders: tuple[tuple[str, ExpectedKey], ...] = Field(
        default=(),
        description="(placeholder name, concrete key) pairs",
    )

    @field_validator("placeholders", mode="before")
    @classmethod
    def _placeholders_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @model_validator(mode="after")
    def _check_unique_placeholders(self) -> LayoutCustomizer:
        names = [name for name, _ in self.placeholders]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Placeholder(s) {duplicates} defined more than once")
        return self

    @field_serializer("placeholders")
    def _placeholders_as_mapping(
        self, placeholders: tuple[tuple[str, ExpectedKey], ...]
    ) -> dict[str, dict[str, Any]]:
        return {
            name: {"label": k.label, "more_keys": list(k.more_keys)}
            for name, k in placeholders
        }

    @property
    def placeholder_map(self) -> Mapping[str, ExpectedKey]:
        return MappingProxyType(dict(self.placeholders))

    def placeholder(self, name: str) -> ExpectedKey | None:
        """The concrete key for placeholder *name*, or None if not defined."""
        for placeholder_name, concrete in self.placeholders:
            if placeholder_name == name:
                return concrete
        return None

    def resolve_key(self, expected: ExpectedKey) -> ExpectedKey:
        """Return the concrete key for a placeholder, or *expected* unchanged."""
        label = expected.label
        concrete = self.placeholder(label)
        if concrete is not None:
            return concrete
        if label == CURRENCY:
            return key(self.currency, self.other_currencies)
        if label in _OTHER_CURRENCY_SLOTS:
            return key(self.other_currencies[_OTHER_CURRENCY_SLOTS.index(label)])
        return expected

    def resolve(self, keyboard: ExpectedKeyboard) -> ExpectedKeyboard:
        """Resolve every placeholder in a table."""
        return tuple(
            tuple(self.resolve_key(k) for k in row) for row in keyboard
        )


def load_customizer(path: Path) -> LayoutCustomizer:
    """Load a single customizer YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return LayoutCustomizer.model_validate(raw)


def load_all_customizers(
    customizers_dir: Path | None = None,
) -> dict[str, LayoutCustomizer]:
    """Load all customizer YAML files, keyed by locale.

    Args:
        customizers_dir: Directory to scan for .yaml files. Defaults to
            the built-in customizers/ directory.

    Returns:
        Dict mapping locale -> LayoutCustomizer. Files without a locale
        are skipped.
    """
    customizers_dir = customizers_dir or _CUSTOMIZERS_DIR
    customizers: dict[str, LayoutCustomizer] = {}
    for yaml_path in sorted(customizers_dir.glob("*.yaml")):
        try:
            customizer = load_customizer(yaml_path)
        except Exception as e:
            logger.warning("Failed to load customizer from %s: %s", yaml_path, e)
            continue
        if customizer.locale is None:
            logger.warning("Customizer %s has no locale, skipping", yaml_path)
            continue
        customizers[customizer.locale] = customizer
        logger.debug("Loaded customizer: %s from %s", customizer.locale, yaml_path)
    logger.info("Loaded %d customizers", len(customizers))
    return customizers


def get_customizer(
    locale: str | None = None,
    customizers_dir: Path | None = None,
) -> LayoutCustomizer:
    """Look up the customizer for *locale*.

    ``None`` returns the neutral default customizer.

    Raises:
        UnknownCustomizerError: If no customizer file declares *locale*.
    """
    if locale is None:
        return LayoutCustomizer()
    customizers = load_all_customizers(customizers_dir)
    try:
        return customizers[locale]
    except KeyError:
        raise UnknownCustomizerError(
            f"No customizer for locale '{locale}'. "
            f"Available locales: {sorted(customizers)}"
        ) from None
