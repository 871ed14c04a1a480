"""Delimited text header reading using pandas.

Only the first row is read. Values are kept as raw strings so that pandas
does not rename duplicate or blank headers.
"""

from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd
from loguru import logger

from headermap.io.excel_reader import HeaderExtractionError


def read_csv_headers(filepath: str | Path, sep: str | None = None) -> list[str]:
    """Read the header row of a CSV/TSV file.

    Args:
        filepath: Path to a delimited text file.
        sep: Field separator. None sniffs it from the file.

    Returns:
        Non-blank header strings in column order.

    Raises:
        FileNotFoundError: If the file does not exist.
        HeaderExtractionError: If the file is empty or cannot be parsed.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    try:
        first_row = pd.read_csv(
            filepath,
            sep=sep,
            header=None,
            nrows=1,
            dtype=str,
            keep_default_na=False,
            engine="python",
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError, csv.Error) as e:
        msg = f"Failed to read headers from {filepath}: {e}"
        raise HeaderExtractionError(msg) from e

    headers = [value.strip() for value in first_row.iloc[0].tolist() if value.strip()]
    logger.info("Read {} header(s) from {}", len(headers), filepath.name)
    return headers
