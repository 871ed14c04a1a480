"""Workbook header extraction using openpyxl.

Reads every worksheet of an .xlsx file and reconstructs one header string
per column. Headers may span several rows (e.g., a "%DM" group row above a
"Maize DM" row) and group cells are often merged across columns, so each
column's header is built from all header rows with merged cells resolved
to their top-left value.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from decimal import Decimal
from pathlib import Path
from zipfile import BadZipFile

from loguru import logger
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet
from pydantic import BaseModel, Field

# Header rows are only searched for in the first few rows of a sheet.
MAX_HEADER_ROWS = 5

# A row is data once more than this fraction of columns is filled and it
# holds numeric values.
_DATA_ROW_FILL_RATIO = 0.3


class HeaderExtractionError(Exception):
    """A workbook could not be opened or read."""


class SheetHeaders(BaseModel):
    """Headers reconstructed from one worksheet."""

    sheet_name: str = Field(..., description="Worksheet title")
    headers: list[str] = Field(default_factory=list, description="One header per non-blank column")
    header_row_count: int = Field(default=0, ge=0, description="Rows detected as header rows")


class WorkbookHeaders(BaseModel):
    """Headers for every worksheet of a workbook, in workbook order."""

    file_path: str = Field(..., description="Path of the source workbook")
    sheets: list[SheetHeaders] = Field(default_factory=list, description="Per-sheet headers")


def extract_headers(filepath: str | Path) -> WorkbookHeaders:
    """Extract headers from all worksheets in a workbook.

    Args:
        filepath: Path to an .xlsx/.xlsm workbook.

    Returns:
        WorkbookHeaders with one SheetHeaders per worksheet.

    Raises:
        FileNotFoundError: If the file does not exist.
        HeaderExtractionError: If the file cannot be opened as a workbook.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Excel file not found: {filepath}")

    logger.info("Reading workbook: {}", filepath.name)

    # Merged cell ranges are not available in read-only mode.
    try:
        wb = load_workbook(filepath, data_only=True)
    except (InvalidFileException, BadZipFile, OSError, KeyError, ValueError) as e:
        msg = f"Failed to open workbook {filepath}: {e}"
        raise HeaderExtractionError(msg) from e

    try:
        sheets = [extract_sheet_headers(ws) for ws in wb.worksheets]
    finally:
        wb.close()

    logger.info(
        "Extracted headers from {} sheet(s) in {}",
        len(sheets),
        filepath.name,
    )
    return WorkbookHeaders(file_path=str(filepath), sheets=sheets)


def extract_sheet_headers(ws: Worksheet) -> SheetHeaders:
    """Reconstruct the headers of a single worksheet.

    Columns whose merged header text is blank are skipped.
    """
    if _is_empty_sheet(ws):
        return SheetHeaders(sheet_name=ws.title)

    header_row_count = detect_header_row_count(ws)
    headers: list[str] = []
    for col in range(1, ws.max_column + 1):
        merged = build_merged_header(ws, header_row_count, col)
        if merged:
            headers.append(merged)

    logger.debug(
        "Sheet '{sheet}': {rows} header row(s), {n} column(s)",
        sheet=ws.title,
        rows=header_row_count,
        n=len(headers),
    )
    return SheetHeaders(sheet_name=ws.title, headers=headers, header_row_count=header_row_count)


def detect_header_row_count(ws: Worksheet) -> int:
    """Detect how many leading rows hold header text.

    Scans up to MAX_HEADER_ROWS rows. A row with numeric values that fills
    more than 30% of the columns is the first data row; a row with text
    pushes the data start below it.

    Returns:
        Number of header rows, at least 1.
    """
    column_count = ws.max_column
    max_rows = min(MAX_HEADER_ROWS, ws.max_row)
    data_start_row = 1

    for row in range(1, max_rows + 1):
        has_numeric = False
        has_text = False
        non_empty = 0

        for col in range(1, column_count + 1):
            value = ws.cell(row=row, column=col).value
            if value is None:
                continue
            non_empty += 1
            if _is_numeric(value):
                has_numeric = True
            elif isinstance(value, str) and value.strip():
                has_text = True

        if has_numeric and non_empty > column_count * _DATA_ROW_FILL_RATIO:
            data_start_row = row
            break

        if has_text:
            data_start_row = row + 1

    return max(1, data_start_row - 1)


def build_merged_header(ws: Worksheet, header_row_count: int, column: int) -> str:
    """Join the header-row texts of one column into a single header.

    Example: row 1 "%DM" merged across B:C, row 2 "Maize DM" in B gives
    "%DM Maize DM" for column B.
    """
    parts: list[str] = []
    for row in range(1, header_row_count + 1):
        value = _merged_cell_value(ws, row, column)
        text = _cell_text(value)
        if text:
            parts.append(text)
    return " ".join(parts)


def save_headers_text(result: WorkbookHeaders, output_path: Path) -> Path:
    """Write extracted headers as a plain-text listing.

    Args:
        result: Extraction result to write.
        output_path: Destination text file.

    Returns:
        The path written.
    """
    lines = [
        f"Excel File: {result.file_path}",
        f"Extracted on: {datetime.now(UTC):%Y-%m-%d %H:%M:%S} UTC",
        "=" * 70,
    ]
    for sheet in result.sheets:
        lines.extend(
            [
                "",
                f"Sheet: {sheet.sheet_name}",
                f"Header Rows: {sheet.header_row_count}",
                f"Columns: {len(sheet.headers)}",
                "-" * 70,
            ]
        )
        lines.extend(sheet.headers)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.info("Headers saved to: {path}", path=output_path)
    return output_path


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_empty_sheet(ws: Worksheet) -> bool:
    return ws.max_row == 1 and ws.max_column == 1 and ws.cell(row=1, column=1).value is None


def _is_numeric(value: object) -> bool:
    """Numbers and dates count as data; bools do not."""
    if isinstance(value, bool):
        return False
    return isinstance(value, int | float | Decimal | datetime | date | time)


def _merged_cell_value(ws: Worksheet, row: int, column: int) -> object:
    """Return a cell's value, resolving merged ranges to their top-left cell."""
    for merged_range in ws.merged_cells.ranges:
        if (
            merged_range.min_row <= row <= merged_range.max_row
            and merged_range.min_col <= column <= merged_range.max_col
        ):
            return ws.cell(row=merged_range.min_row, column=merged_range.min_col).value
    return ws.cell(row=row, column=column).value


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
