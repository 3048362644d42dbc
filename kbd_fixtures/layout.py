"""
Layout value for kbd-fixtures.

A ``Layout`` bundles everything a test harness needs about one keyboard
variant:

- ``name``: stable identifier (e.g. ``"swiss"``).
- ``alphabet_common``: the alphabetic table shared across form factors.
- ``alphabet_phone``: optional phone-specific table; ``None`` when the
  variant does not diverge between phone and tablet.
- ``symbols`` / ``symbols_shifted``: companion symbol layouts.
- ``customizer``: the locale collaborator that resolves placeholders.

Layouts are composed by per-variant factory functions (see layouts/),
not by subclassing a common base.
"""

from __future__ import annotations

from dataclasses import dataclass

from kbd_fixtures.customizer import LayoutCustomizer
from kbd_fixtures.expected.key import ExpectedKeyboard


@dataclass(frozen=True)
class SymbolsLayout:
    """A companion table of non-alphabetic keys."""

    name: str
    keyboard: ExpectedKeyboard

    def get_name(self) -> str:
        return self.name

    def get_layout(self, customizer: LayoutCustomizer) -> ExpectedKeyboard:
        """The symbol table with currency slots resolved."""
        return customizer.resolve(self.keyboard)


@dataclass(frozen=True)
class Layout:
    """One keyboard variant's expected alphabet and companion layouts."""

    name: str
    alphabet_common: ExpectedKeyboard
    symbols: SymbolsLayout
    symbols_shifted: SymbolsLayout
    customizer: LayoutCustomizer
    alphabet_phone: ExpectedKeyboard | None = None

    def get_name(self) -> str:
        return self.name

    def get_common_alphabet_layout(self, is_phone: bool) -> ExpectedKeyboard:
        """The unresolved alphabet table for a form factor.

        Falls back to ``alphabet_common`` when no phone table is declared,
        so both values of *is_phone* return the same table.
        """
        if is_phone and self.alphabet_phone is not None:
            return self.alphabet_phone
        return self.alphabet_common

    def get_alphabet_layout(self, is_phone: bool) -> ExpectedKeyboard:
        """The alphabet table with placeholders resolved by the customizer."""
        return self.customizer.resolve(self.get_common_alphabet_layout(is_phone))

    def get_symbols(self) -> SymbolsLayout:
        return self.symbols

    def get_symbols_shifted(self) -> SymbolsLayout:
        return self.symbols_shifted

    @property
    def locale(self) -> str | None:
        return self.customizer.locale
