"""
Builder for expected keyboard tables.

Fixture tables are written as a chain of row assignments that ends in
``build()``::

    ALPHABET = (
        ExpectedKeyboardBuilder(row_widths={1: 11, 2: 11, 3: 7})
        .set_keys_of_row(1, key("q", more_key("1")), ...)
        .set_labels_of_row(2, "a", "s", ...)
        .set_labels_of_row(3, "y", "x", ...)
        .build()
    )

The builder is the only mutable piece: ``build()`` returns tuples of frozen
``ExpectedKey`` models and marks the builder finalized. Every later call
raises ``BuilderFinalizedError``.

When ``row_widths`` is given, each row assignment is checked against the
row's physical key count and a mismatch raises ``RowWidthError`` at import
time of the fixture module, not in the consuming harness.
"""

from __future__ import annotations

import logging
from typing import Callable

from kbd_fixtures.exceptions import (
    BuilderFinalizedError,
    KeyNotFoundError,
    LayoutDefinitionError,
    RowWidthError,
)
from kbd_fixtures.expected.key import ExpectedKey, ExpectedKeyboard, key

logger = logging.getLogger(__name__)


class ExpectedKeyboardBuilder:
    """Accumulates rows of ExpectedKey and finalizes them into a table.

    Args:
        row_widths: Optional mapping of 1-based row index to the number of
            keys that row must have. Rows not listed are not width-checked,
            but every listed row must be assigned before ``build()``.
    """

    def __init__(self, row_widths: dict[int, int] | None = None) -> None:
        self._row_widths = dict(row_widths or {})
        self._rows: dict[int, list[ExpectedKey]] = {}
        self._built = False

    @classmethod
    def from_keyboard(
        cls,
        keyboard: ExpectedKeyboard,
        row_widths: dict[int, int] | None = None,
    ) -> ExpectedKeyboardBuilder:
        """Start a new builder pre-filled with an existing table's rows."""
        builder = cls(row_widths=row_widths)
        for row_index, row in enumerate(keyboard, start=1):
            builder.set_keys_of_row(row_index, *row)
        return builder

    # ------------------------------------------------------------------
    # Row assignment
    # ------------------------------------------------------------------

    def set_keys_of_row(self, row: int, *keys: ExpectedKey) -> ExpectedKeyboardBuilder:
        """Assign the ordered keys of a 1-based row."""
        self._check_not_built()
        # bool is an int subclass
        if not isinstance(row, int) or isinstance(row, bool):
            raise LayoutDefinitionError(
                f"Row index must be an int, got {type(row).__name__} {row!r}"
            )
        if row < 1:
            raise LayoutDefinitionError(f"Row index must be >= 1, got {row}")
        if not keys:
            raise LayoutDefinitionError(f"Row {row} must have at least one key")
        expected = self._row_widths.get(row)
        if expected is not None and len(keys) != expected:
            raise RowWidthError(row, expected, len(keys))
        self._rows[row] = list(keys)
        logger.debug("Row %d set: %s", row, " ".join(str(k) for k in keys))
        return self

    def set_labels_of_row(self, row: int, *labels: str) -> ExpectedKeyboardBuilder:
        """Assign a row from bare labels (keys without alternates)."""
        return self.set_keys_of_row(row, *(key(label) for label in labels))

    # ------------------------------------------------------------------
    # Edits by label
    # ------------------------------------------------------------------

    def set_more_keys_of(
        self, label: str, *more_keys: str | tuple[str, ...]
    ) -> ExpectedKeyboardBuilder:
        """Replace the alternates of every key labeled *label*."""
        self._check_not_built()
        found = self._replace_where(label, lambda k: k.with_more_keys(*more_keys))
        if not found:
            raise KeyNotFoundError(f"No key labeled '{label}' to set more keys on")
        return self

    def replace_key_of_label(
        self, label: str, replacement: ExpectedKey
    ) -> ExpectedKeyboardBuilder:
        """Swap every key labeled *label* for *replacement*."""
        self._check_not_built()
        found = self._replace_where(label, lambda _k: replacement)
        if not found:
            raise KeyNotFoundError(f"No key labeled '{label}' to replace")
        return self

    def _replace_where(
        self, label: str, make: Callable[[ExpectedKey], ExpectedKey]
    ) -> bool:
        found = False
        for keys in self._rows.values():
            for i, existing in enumerate(keys):
                if existing.label == label:
                    keys[i] = make(existing)
                    found = True
        return found

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def build(self) -> ExpectedKeyboard:
        """Finalize the rows into an immutable table.

        Raises:
            BuilderFinalizedError: If ``build()`` was already called.
            LayoutDefinitionError: If no rows were assigned, rows are not
                contiguous from 1, or a width-declared row is missing.
        """
        self._check_not_built()
        if not self._rows:
            raise LayoutDefinitionError("Cannot build a keyboard with no rows")

        missing = sorted(set(self._row_widths) - set(self._rows))
        if missing:
            raise LayoutDefinitionError(
                f"Row(s) {missing} declared in row_widths but never assigned"
            )

        last = max(self._rows)
        gaps = [r for r in range(1, last + 1) if r not in self._rows]
        if gaps:
            raise LayoutDefinitionError(f"Row(s) {gaps} were skipped")

        self._built = True
        table = tuple(tuple(self._rows[r]) for r in range(1, last + 1))
        logger.debug(
            "Built keyboard: %d rows, widths=%s",
            len(table), [len(row) for row in table],
        )
        return table

    @property
    def is_built(self) -> bool:
        return self._built

    def _check_not_built(self) -> None:
        if self._built:
            raise BuilderFinalizedError(
                "ExpectedKeyboardBuilder cannot be used after build()"
            )
