"""
Expected key model for kbd-fixtures.

An ``ExpectedKey`` is the expected content of one key position: its primary
``label`` plus the ordered ``more_keys`` reachable by long-press. The label
may be a placeholder constant (e.g. ``"ROW1_11"``) whose glyph is supplied
later by a locale customizer.

Factories mirror the way fixture tables are written::

    key("q", more_key("1"))
    key("(", join_more_keys("<", "{", "["))
    key("a")

Keys are frozen Pydantic models, so they are hashable and compare by value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExpectedKey(BaseModel):
    """One key's expected label and long-press alternates."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Primary label or placeholder")
    more_keys: tuple[str, ...] = Field(
        default=(), description="Alternates reachable via long-press, in order"
    )

    @property
    def has_more_keys(self) -> bool:
        return bool(self.more_keys)

    def with_more_keys(self, *more_keys: str | tuple[str, ...]) -> ExpectedKey:
        """Return a copy of this key with its alternates replaced."""
        return ExpectedKey(label=self.label, more_keys=join_more_keys(*more_keys))

    def __str__(self) -> str:
        if not self.more_keys:
            return self.label
        return f"{self.label}|{','.join(self.more_keys)}"


# Type alias for a finalized table: rows of keys, row 1 first.
ExpectedKeyboard = tuple[tuple[ExpectedKey, ...], ...]


def join_more_keys(*more_keys: str | tuple[str, ...]) -> tuple[str, ...]:
    """Flatten labels and label tuples into a single alternates tuple."""
    joined: list[str] = []
    for item in more_keys:
        if isinstance(item, tuple):
            joined.extend(item)
        else:
            joined.append(item)
    return tuple(joined)


def more_key(label: str) -> tuple[str, ...]:
    """A single long-press alternate."""
    return (label,)


def key(label: str, *more_keys: str | tuple[str, ...]) -> ExpectedKey:
    """Build an ExpectedKey with optional alternates."""
    return ExpectedKey(label=label, more_keys=join_more_keys(*more_keys))
