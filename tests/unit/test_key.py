"""
Unit tests for the expected key model (kbd_fixtures.expected.key).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kbd_fixtures.expected.key import ExpectedKey, join_more_keys, key, more_key


class TestKeyFactory:
    """Tests for key() / more_key() / join_more_keys()."""

    def test_bare_key_has_no_more_keys(self):
        k = key("a")
        assert k.label == "a"
        assert k.more_keys == ()
        assert k.has_more_keys is False

    def test_single_more_key(self):
        k = key("q", more_key("1"))
        assert k.more_keys == ("1",)
        assert k.has_more_keys is True

    def test_joined_more_keys_keep_order(self):
        k = key("(", join_more_keys("<", "{", "["))
        assert k.more_keys == ("<", "{", "[")

    def test_mixed_strings_and_tuples_flatten(self):
        assert join_more_keys("a", ("b", "c"), "d") == ("a", "b", "c", "d")

    def test_empty_label_rejected(self):
        with pytest.raises(ValidationError):
            key("")


class TestExpectedKey:
    """Tests for ExpectedKey value semantics."""

    def test_value_equality(self):
        assert key("q", more_key("1")) == ExpectedKey(label="q", more_keys=("1",))
        assert key("q") != key("q", more_key("1"))

    def test_hashable(self):
        assert len({key("a"), key("a"), key("b")}) == 2

    def test_frozen(self):
        k = key("a")
        with pytest.raises(ValidationError):
            k.label = "b"

    def test_more_keys_list_coerced_to_tuple(self):
        k = ExpectedKey.model_validate({"label": "ü", "more_keys": ["è"]})
        assert k.more_keys == ("è",)

    def test_with_more_keys_returns_copy(self):
        original = key("e", more_key("3"))
        changed = original.with_more_keys("é", "è")
        assert changed.more_keys == ("é", "è")
        assert original.more_keys == ("3",)

    def test_str(self):
        assert str(key("a")) == "a"
        assert str(key("(", join_more_keys("<", "{"))) == "(|<,{"
