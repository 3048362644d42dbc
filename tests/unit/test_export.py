"""
Unit tests for the exporter (kbd_fixtures.export).

Tests table flattening, CSV and Parquet export, directory creation,
and error handling using pytest's tmp_path fixture.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pandas as pd
import pytest

from kbd_fixtures.exceptions import ExportError
from kbd_fixtures.expected.builder import ExpectedKeyboardBuilder
from kbd_fixtures.expected.key import join_more_keys, key
from kbd_fixtures.export import (
    FRAME_COLUMNS,
    decode_more_keys,
    encode_more_keys,
    export_layout,
    keyboard_to_frame,
    layout_tables,
)
from kbd_fixtures.layouts.swiss import swiss


# ---------------------------------------------------------------------------
# keyboard_to_frame
# ---------------------------------------------------------------------------

class TestKeyboardToFrame:

    def test_one_row_per_key(self, swiss_layout):
        df = keyboard_to_frame(swiss_layout.get_common_alphabet_layout(True))
        assert list(df.columns) == FRAME_COLUMNS
        assert len(df) == 11 + 11 + 7

    def test_positions_are_one_based(self, swiss_layout):
        df = keyboard_to_frame(swiss_layout.get_common_alphabet_layout(True))
        first = df.iloc[0]
        assert (first["row"], first["column"], first["label"]) == (1, 1, "q")
        last = df.iloc[-1]
        assert (last["row"], last["column"], last["label"]) == (3, 7, "m")

    def test_more_keys_joined(self, swiss_layout):
        df = keyboard_to_frame(swiss_layout.get_common_alphabet_layout(True))
        row1 = df[df["row"] == 1]
        assert list(row1["more_keys"]) == list("1234567890") + [""]
        assert list(row1["more_keys_count"]) == [1] * 10 + [0]


# ---------------------------------------------------------------------------
# encode_more_keys / decode_more_keys
# ---------------------------------------------------------------------------

class TestMoreKeysEncoding:

    def test_plain_values_comma_joined(self):
        assert encode_more_keys(("<", "{", "[")) == "<,{,["
        assert decode_more_keys("<,{,[") == ("<", "{", "[")

    def test_empty(self):
        assert encode_more_keys(()) == ""
        assert decode_more_keys("") == ()

    def test_comma_alternate_escaped(self):
        encoded = encode_more_keys((",", ";"))
        assert encoded == "\\,,;"
        assert decode_more_keys(encoded) == (",", ";")

    def test_backslash_alternate_escaped(self):
        encoded = encode_more_keys(("\\", "a\\,b"))
        assert decode_more_keys(encoded) == ("\\", "a\\,b")

    def test_comma_survives_csv_export(self, tmp_path):
        keyboard = (
            ExpectedKeyboardBuilder()
            .set_keys_of_row(1, key(".", join_more_keys(",", "?", "!")), key("\\", ","))
            .build()
        )
        layout = replace(swiss(), alphabet_common=keyboard)
        export_layout(layout, tmp_path, output_format="csv")
        loaded = pd.read_csv(
            tmp_path / "alphabet.csv", encoding="utf-8-sig", keep_default_na=False,
        )
        assert [decode_more_keys(v) for v in loaded["more_keys"]] == [
            (",", "?", "!"), (",",),
        ]
        assert list(loaded["more_keys_count"]) == [3, 1]
        assert loaded.iloc[1]["label"] == "\\"


# ---------------------------------------------------------------------------
# layout_tables
# ---------------------------------------------------------------------------

class TestLayoutTables:

    def test_table_names(self, swiss_layout):
        assert list(layout_tables(swiss_layout)) == ["alphabet", "symbols", "symbols_shifted"]

    def test_resolved(self, de_ch):
        tables = layout_tables(swiss(de_ch), resolve=True)
        assert tables["alphabet"][0][10].label == "ü"
        assert tables["symbols"][1][2].label == "$"

    def test_unresolved(self, de_ch):
        tables = layout_tables(swiss(de_ch), resolve=False)
        assert tables["alphabet"][0][10].label == "ROW1_11"
        assert tables["symbols"][1][2].label == "CURRENCY"


# ---------------------------------------------------------------------------
# export_layout
# ---------------------------------------------------------------------------

class TestExportLayout:

    def test_csv_export(self, tmp_path, de_ch):
        paths = export_layout(swiss(de_ch), tmp_path, output_format="csv")
        assert [Path(p).name for p in paths] == [
            "alphabet.csv", "symbols.csv", "symbols_shifted.csv",
        ]
        loaded = pd.read_csv(
            tmp_path / "alphabet.csv", encoding="utf-8-sig", keep_default_na=False,
        )
        assert list(loaded.columns) == FRAME_COLUMNS
        assert loaded.iloc[10]["label"] == "ü"
        assert loaded.iloc[10]["more_keys"] == "è"

    def test_parquet_export(self, tmp_path, swiss_layout):
        export_layout(swiss_layout, tmp_path, output_format="parquet")
        loaded = pd.read_parquet(tmp_path / "symbols.parquet")
        assert len(loaded) == 10 + 9 + 7
        assert loaded.iloc[0]["label"] == "1"

    def test_creates_output_dir(self, tmp_path, swiss_layout):
        out = tmp_path / "a" / "b"
        export_layout(swiss_layout, out)
        assert (out / "alphabet.csv").exists()

    def test_unsupported_format(self, tmp_path, swiss_layout):
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_layout(swiss_layout, tmp_path, output_format="xlsx")

    def test_write_failure_wrapped(self, tmp_path, swiss_layout):
        # A directory where the file should go makes the write fail.
        (tmp_path / "alphabet.csv").mkdir()
        with pytest.raises(ExportError, match="alphabet.csv"):
            export_layout(swiss_layout, tmp_path, output_format="csv")
