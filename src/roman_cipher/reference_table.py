"""Letter reference table for the cipher.

Lists every letter with its alphabet position and Roman numeral, the same
table users consult when encoding or decoding by hand.
"""
from pathlib import Path

import pandas as pd

from .common.letter_table import LETTER_ENTRIES
from .common.validators import validate_csv_output


REFERENCE_COLUMNS = ["letter", "number", "roman"]


def reference_dataframe() -> pd.DataFrame:
    """Return the 26 letter rows as a DataFrame with REFERENCE_COLUMNS."""
    return pd.DataFrame(
        [(entry.letter, entry.ordinal, entry.roman) for entry in LETTER_ENTRIES],
        columns=REFERENCE_COLUMNS,
    )


def format_reference_table(columns: int = 2) -> str:
    """Format the table as aligned console text, split over several columns.

    Args:
        columns: Number of side-by-side column groups

    Returns:
        Multi-line string such as "A   1  I       N  14  XIV"
    """
    if columns < 1:
        raise ValueError(f"Error: columns must be at least 1, got {columns}")

    cells = [f"{e.letter}  {e.ordinal:>2}  {e.roman:<6}" for e in LETTER_ENTRIES]
    rows_per_column = -(-len(cells) // columns)  # ceiling division

    lines = []
    for row in range(rows_per_column):
        row_cells = cells[row::rows_per_column]
        lines.append("    ".join(row_cells).rstrip())
    return "\n".join(lines)


def export_reference_table(output_csv_path: str) -> str:
    """Write the reference table to a CSV file.

    Args:
        output_csv_path: Destination CSV path

    Returns:
        str: Path to the written CSV file

    Raises:
        ValueError: If the path is not a valid CSV output path
    """
    output_path = Path(output_csv_path)
    validate_csv_output(output_path, "Reference table CSV")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    reference_dataframe().to_csv(output_path, index=False)
    return str(output_path)
