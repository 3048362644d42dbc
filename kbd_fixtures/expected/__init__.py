"""
Expected-keyboard sub-package for kbd-fixtures.

Contains the building blocks every layout fixture is written with:

- key.py defines the frozen ExpectedKey model and the key()/more_key()/
  join_more_keys() factories.
- builder.py implements ExpectedKeyboardBuilder, which assembles rows into
  an immutable table and rejects rows whose width does not match the
  physical keyboard.

Layout fixtures (layouts/) import from here; nothing in this package knows
about any particular layout or locale.
"""
