"""
Layout fixture sub-package for kbd-fixtures.

Each module declares one keyboard variant's expected tables with
ExpectedKeyboardBuilder and exposes a factory that composes them into a
Layout. symbols.py holds the companion symbol layouts the alphabetic
layouts pair with. The registry (layout_registry.py in the parent package)
maps layout names to these factories.
"""
