"""Tests for the letter reference table."""

import pandas as pd
import pytest

from roman_cipher.reference_table import (
    REFERENCE_COLUMNS,
    export_reference_table,
    format_reference_table,
    reference_dataframe,
)


def test_reference_dataframe():
    """Test the table contents."""
    df = reference_dataframe()
    assert list(df.columns) == REFERENCE_COLUMNS
    assert len(df) == 26
    assert df.iloc[0].tolist() == ["A", 1, "I"]
    assert df.iloc[-1].tolist() == ["Z", 26, "XXVI"]


def test_format_reference_table_two_columns():
    """Test the console layout."""
    lines = format_reference_table().splitlines()
    assert len(lines) == 13
    assert lines[0].startswith("A   1  I")
    assert "N  14  XIV" in lines[0]
    assert "Z  26  XXVI" in lines[-1]


def test_format_reference_table_single_column():
    """Test one row per letter."""
    lines = format_reference_table(columns=1).splitlines()
    assert len(lines) == 26
    assert lines[7] == "H   8  VIII"


def test_format_reference_table_invalid_columns():
    """Test that zero columns is rejected."""
    with pytest.raises(ValueError):
        format_reference_table(columns=0)


def test_export_reference_table(tmp_path):
    """Test CSV export."""
    output = export_reference_table(str(tmp_path / "out" / "reference.csv"))

    df = pd.read_csv(output)
    assert list(df.columns) == REFERENCE_COLUMNS
    assert df.loc[df["letter"] == "M", "roman"].item() == "XIII"


def test_export_reference_table_rejects_non_csv(tmp_path):
    """Test that a non-CSV output path is rejected."""
    with pytest.raises(ValueError):
        export_reference_table(str(tmp_path / "reference.txt"))
