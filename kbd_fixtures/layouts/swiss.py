"""
Swiss alphabet layout (QWERTZ) fixture.

The last key of row 1 and the last two keys of row 2 are placeholder slots;
Swiss German and Swiss French customizers fill them with different umlauts
and accented letters. The phone and tablet alphabets are identical.
"""

from __future__ import annotations

from kbd_fixtures.customizer import LayoutCustomizer
from kbd_fixtures.expected.builder import ExpectedKeyboardBuilder
from kbd_fixtures.expected.key import key, more_key
from kbd_fixtures.layout import Layout, SymbolsLayout
from kbd_fixtures.layouts.symbols import SYMBOLS, SYMBOLS_SHIFTED

LAYOUT_NAME = "swiss"

ROW1_11 = "ROW1_11"
ROW2_10 = "ROW2_10"
ROW2_11 = "ROW2_11"

ROW_WIDTHS = {1: 11, 2: 11, 3: 7}

ALPHABET_COMMON = (
    ExpectedKeyboardBuilder(row_widths=ROW_WIDTHS)
    .set_keys_of_row(
        1,
        key("q", more_key("1")),
        key("w", more_key("2")),
        key("e", more_key("3")),
        key("r", more_key("4")),
        key("t", more_key("5")),
        key("z", more_key("6")),
        key("u", more_key("7")),
        key("i", more_key("8")),
        key("o", more_key("9")),
        key("p", more_key("0")),
        key(ROW1_11),
    )
    .set_labels_of_row(2, "a", "s", "d", "f", "g", "h", "j", "k", "l", ROW2_10, ROW2_11)
    .set_labels_of_row(3, "y", "x", "c", "v", "b", "n", "m")
    .build()
)


def swiss(
    customizer: LayoutCustomizer | None = None,
    symbols: SymbolsLayout = SYMBOLS,
    symbols_shifted: SymbolsLayout = SYMBOLS_SHIFTED,
) -> Layout:
    """Build the Swiss layout around a customizer and its symbol layouts."""
    return Layout(
        name=LAYOUT_NAME,
        alphabet_common=ALPHABET_COMMON,
        symbols=symbols,
        symbols_shifted=symbols_shifted,
        customizer=customizer if customizer is not None else LayoutCustomizer(),
    )
