"""
Exporter for kbd-fixtures.

Flattens a layout's expected tables into DataFrames and writes them to the
output directory in the configured format (CSV or Parquet), so harnesses
written outside Python can consume the same fixtures.

Output file naming convention:
  "alphabet.{format}"         -- the alphabet table for the chosen form factor
  "symbols.{format}"          -- the unshifted symbol table
  "symbols_shifted.{format}"  -- the shifted symbol table

Each file has one row per key with columns:
  row, column       -- 1-based position
  label             -- primary label (or placeholder name if unresolved)
  more_keys         -- comma-joined alternates, "" when none; a literal
                       "," or "\\" inside an alternate is escaped with a
                       backslash (read back with decode_more_keys())
  more_keys_count   -- number of alternates

CSV files are written with ``utf-8-sig`` encoding (BOM) so accented labels
display correctly when opened in Excel.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from kbd_fixtures.exceptions import ExportError
from kbd_fixtures.expected.key import ExpectedKeyboard
from kbd_fixtures.layout import Layout

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}

FRAME_COLUMNS = ["row", "column", "label", "more_keys", "more_keys_count"]

_SEPARATOR = ","
_ESCAPE = "\\"


def encode_more_keys(more_keys: tuple[str, ...]) -> str:
    """Join alternates with commas, backslash-escaping commas and backslashes."""
    return _SEPARATOR.join(
        m.replace(_ESCAPE, _ESCAPE * 2).replace(_SEPARATOR, _ESCAPE + _SEPARATOR)
        for m in more_keys
    )


def decode_more_keys(text: str) -> tuple[str, ...]:
    """Split a ``more_keys`` cell written by encode_more_keys()."""
    if not text:
        return ()
    parts: list[str] = []
    current: list[str] = []
    escaped = False
    for ch in text:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == _ESCAPE:
            escaped = True
        elif ch == _SEPARATOR:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    if escaped:
        # Trailing lone backslash
        current.append(_ESCAPE)
    parts.append("".join(current))
    return tuple(parts)


def keyboard_to_frame(keyboard: ExpectedKeyboard) -> pd.DataFrame:
    """Flatten a table into one DataFrame row per key."""
    records = [
        {
            "row": row_index,
            "column": col_index,
            "label": k.label,
            "more_keys": encode_more_keys(k.more_keys),
            "more_keys_count": len(k.more_keys),
        }
        for row_index, row in enumerate(keyboard, start=1)
        for col_index, k in enumerate(row, start=1)
    ]
    return pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)


def layout_tables(
    layout: Layout,
    is_phone: bool = True,
    resolve: bool = True,
) -> dict[str, ExpectedKeyboard]:
    """Collect a layout's alphabet and symbol tables by output name."""
    if resolve:
        alphabet = layout.get_alphabet_layout(is_phone)
        symbols = layout.symbols.get_layout(layout.customizer)
        symbols_shifted = layout.symbols_shifted.get_layout(layout.customizer)
    else:
        alphabet = layout.get_common_alphabet_layout(is_phone)
        symbols = layout.symbols.keyboard
        symbols_shifted = layout.symbols_shifted.keyboard
    return {
        "alphabet": alphabet,
        layout.symbols.get_name(): symbols,
        layout.symbols_shifted.get_name(): symbols_shifted,
    }


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_layout(
    layout: Layout,
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "csv",
    is_phone: bool = True,
    resolve: bool = True,
) -> list[str]:
    """Write a layout's alphabet and symbol tables to disk.

    The output directory is created recursively if it does not exist.

    Args:
        layout: The layout to export.
        output_dir: Directory to write files into (created if needed).
        output_format: "csv" or "parquet".
        is_phone: Selects the phone or tablet alphabet table.
        resolve: If True, placeholders are resolved by the layout's
            customizer before export.

    Returns:
        List of file paths (as strings) that were written, alphabet first.

    Raises:
        ExportError: If *output_format* is unsupported, or if any write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[str] = []
    for table_name, keyboard in layout_tables(layout, is_phone, resolve).items():
        df = keyboard_to_frame(keyboard)
        file_path = out / f"{table_name}.{output_format}"
        _write_dataframe(df, file_path, output_format)
        written.append(str(file_path))
        logger.info(
            "Exported %s/%s -> %s (%d keys)",
            layout.get_name(),
            table_name,
            file_path.name,
            len(df),
        )

    return written
