"""
Layout registry for kbd-fixtures.

Maps layout names to the factory functions in kbd_fixtures/layouts/.
The map is built lazily so importing the registry does not build every
fixture table up front.
"""

from __future__ import annotations

import logging
from typing import Callable

from kbd_fixtures.customizer import LayoutCustomizer
from kbd_fixtures.exceptions import UnknownLayoutError
from kbd_fixtures.layout import Layout

logger = logging.getLogger(__name__)

LayoutFactory = Callable[[LayoutCustomizer | None], Layout]

# Maps layout name to its factory
_LAYOUT_MAP: dict[str, LayoutFactory] = {}


def _get_layout_map() -> dict[str, LayoutFactory]:
    """Lazily build the layout map to avoid circular imports."""
    if not _LAYOUT_MAP:
        from kbd_fixtures.layouts.swiss import LAYOUT_NAME as SWISS, swiss

        _LAYOUT_MAP[SWISS] = swiss
    return _LAYOUT_MAP


def available_layouts() -> list[str]:
    """Names of all registered layouts, sorted."""
    return sorted(_get_layout_map())


def get_layout(name: str, customizer: LayoutCustomizer | None = None) -> Layout:
    """Build the registered layout *name* with an optional customizer.

    Raises:
        UnknownLayoutError: If *name* is not registered.
    """
    layout_map = _get_layout_map()
    factory = layout_map.get(name)
    if factory is None:
        raise UnknownLayoutError(
            f"Unknown layout '{name}'. Available layouts: {sorted(layout_map)}"
        )
    layout = factory(customizer)
    logger.debug("Built layout '%s' (locale=%s)", name, layout.locale)
    return layout
