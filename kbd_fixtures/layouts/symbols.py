"""
Companion symbol layouts shared by the alphabetic layouts.

Currency positions are placeholders resolved by the layout's customizer.
"""

from __future__ import annotations

from kbd_fixtures.customizer import (
    CURRENCY,
    OTHER_CURRENCY_1,
    OTHER_CURRENCY_2,
    OTHER_CURRENCY_3,
    OTHER_CURRENCY_4,
)
from kbd_fixtures.expected.builder import ExpectedKeyboardBuilder
from kbd_fixtures.expected.key import join_more_keys, key, more_key
from kbd_fixtures.layout import SymbolsLayout

SYMBOLS_ROW_WIDTHS = {1: 10, 2: 9, 3: 7}

SYMBOLS_COMMON = (
    ExpectedKeyboardBuilder(row_widths=SYMBOLS_ROW_WIDTHS)
    .set_keys_of_row(
        1,
        key("1", join_more_keys("¹", "½", "⅓", "¼", "⅛")),
        key("2", join_more_keys("²", "⅔")),
        key("3", join_more_keys("³", "¾", "⅜")),
        key("4", more_key("⁴")),
        key("5", more_key("⅝")),
        key("6"),
        key("7", more_key("⅞")),
        key("8"),
        key("9"),
        key("0", join_more_keys("ⁿ", "∅")),
    )
    .set_keys_of_row(
        2,
        key("@"),
        key("#"),
        key(CURRENCY),
        key("%", more_key("‰")),
        key("&"),
        key("-", join_more_keys("_", "–", "—", "·")),
        key("+", more_key("±")),
        key("(", join_more_keys("<", "{", "[")),
        key(")", join_more_keys(">", "}", "]")),
    )
    .set_keys_of_row(
        3,
        key("*", join_more_keys("†", "‡", "★")),
        key('"', join_more_keys("„", "“", "”", "«", "»")),
        key("'", join_more_keys("‚", "‘", "’", "‹", "›")),
        key(":"),
        key(";"),
        key("!", more_key("¡")),
        key("?", more_key("¿")),
    )
    .build()
)

SYMBOLS_SHIFTED_COMMON = (
    ExpectedKeyboardBuilder(row_widths=SYMBOLS_ROW_WIDTHS)
    .set_keys_of_row(
        1,
        key("~"),
        key("`"),
        key("|"),
        key("•", join_more_keys("♪", "♥", "♠", "♦", "♣")),
        key("√"),
        key("π", more_key("Π")),
        key("÷"),
        key("×"),
        key("¶", more_key("§")),
        key("∆"),
    )
    .set_keys_of_row(
        2,
        key(OTHER_CURRENCY_1),
        key(OTHER_CURRENCY_2),
        key(OTHER_CURRENCY_3),
        key(OTHER_CURRENCY_4),
        key("^", join_more_keys("↑", "↓", "←", "→")),
        key("°", join_more_keys("′", "″")),
        key("=", join_more_keys("≠", "≈", "∞")),
        key("{"),
        key("}"),
    )
    .set_labels_of_row(3, "\\", "©", "®", "™", "℅", "[", "]")
    .build()
)

SYMBOLS = SymbolsLayout(name="symbols", keyboard=SYMBOLS_COMMON)
SYMBOLS_SHIFTED = SymbolsLayout(name="symbols_shifted", keyboard=SYMBOLS_SHIFTED_COMMON)
