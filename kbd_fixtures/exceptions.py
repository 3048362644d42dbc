"""
Custom exception hierarchy for kbd-fixtures.

Callers (typically a test harness) can catch a specific failure, such as a
mistyped row in a fixture definition or an unknown layout name, without
relying on generic ValueError/KeyError. Messages name the layout, row or
file involved so fixture authoring mistakes are easy to locate.
"""


class KbdFixturesError(Exception):
    """Base exception for all kbd-fixtures errors."""


class LayoutDefinitionError(KbdFixturesError):
    """Raised when a fixture table is authored incorrectly.

    For example a row index below 1, a gap between assigned rows, or a
    row assigned with no keys at all.
    """


class RowWidthError(LayoutDefinitionError):
    """Raised when a row's key count differs from its physical width."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row} has {actual} key(s), expected {expected}"
        )


class KeyNotFoundError(LayoutDefinitionError):
    """Raised when a builder edit refers to a label that is not in the table."""


class BuilderFinalizedError(KbdFixturesError):
    """Raised when an ExpectedKeyboardBuilder is used after build()."""


class UnknownLayoutError(KbdFixturesError):
    """Raised when a layout name is not registered."""


class UnknownCustomizerError(KbdFixturesError):
    """Raised when no customizer YAML exists for the requested locale."""


class ConfigValidationError(KbdFixturesError):
    """Raised when fixtures.yaml fails validation.

    This can happen if:
    - The file is empty.
    - The referenced layout is not registered.
    - The referenced locale has no customizer.
    """


class ExportError(KbdFixturesError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
